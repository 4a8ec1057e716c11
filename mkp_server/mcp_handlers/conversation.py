"""
Conversation tool handlers.
"""

from mkp_server.cognitive_system import MockMKPSystem

from .decorators import mcp_tool
from .error_helpers import ToolResult, ToolSuccess
from .formatters import render_conversation
from .schemas import TriggerConversationParams


@mcp_tool("trigger_conversation", params=TriggerConversationParams)
async def handle_trigger_conversation(system: MockMKPSystem, params: TriggerConversationParams) -> ToolResult:
    """Run MKP conversation analysis on a user input"""
    result = await system.trigger_conversation(params.user_input, params.user_profile)
    return ToolSuccess(render_conversation(result))
