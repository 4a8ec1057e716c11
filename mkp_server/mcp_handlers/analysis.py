"""
Context analysis and enhancement tool handlers.
"""

from mkp_server.cognitive_system import MockMKPSystem

from .decorators import mcp_tool
from .error_helpers import ToolResult, ToolSuccess
from .formatters import render_analysis, render_enhancement
from .schemas import AnalyzeContextParams, EnhanceCognitionParams


@mcp_tool("analyze_context", params=AnalyzeContextParams)
async def handle_analyze_context(system: MockMKPSystem, params: AnalyzeContextParams) -> ToolResult:
    """Extract topics, complexity and approach from a context"""
    analysis = await system.analyze_context(params.context)
    return ToolSuccess(render_analysis(analysis))


@mcp_tool("enhance_cognition", params=EnhanceCognitionParams)
async def handle_enhance_cognition(system: MockMKPSystem, params: EnhanceCognitionParams) -> ToolResult:
    """Activate a domain-specific enhancement for a task"""
    enhancement = await system.enhance_cognition(params.domain, params.task)
    return ToolSuccess(render_enhancement(enhancement))
