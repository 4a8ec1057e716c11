"""
System information tool handlers.
"""

from mkp_server.cognitive_system import MockMKPSystem

from .decorators import mcp_tool
from .error_helpers import ToolResult, ToolSuccess
from .formatters import render_capabilities, render_status
from .schemas import NoParams


@mcp_tool("get_system_status")
async def handle_get_system_status(system: MockMKPSystem, params: NoParams) -> ToolResult:
    """Report MKP health, load and module status"""
    status = await system.get_system_status()
    return ToolSuccess(render_status(status))


@mcp_tool("get_capabilities")
async def handle_get_capabilities(system: MockMKPSystem, params: NoParams) -> ToolResult:
    """List MKP capabilities by category"""
    capabilities = await system.get_capabilities()
    return ToolSuccess(render_capabilities(capabilities))
