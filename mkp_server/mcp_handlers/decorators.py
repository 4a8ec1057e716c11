"""
MCP tool decorator and tool definition record.

@mcp_tool marks a handler with its tool name and parameter model. It does not
register anything globally; build_tool_registry() collects decorated handlers
and binds them to a provider instance.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Type

from mcp.types import Tool

from .error_helpers import ToolResult
from .schemas import NoParams, ToolParams

# (system, params) -> ToolResult
ToolHandler = Callable[[Any, ToolParams], Awaitable[ToolResult]]
# params -> ToolResult, with the provider already bound
BoundHandler = Callable[[ToolParams], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """Single source of truth for a registered MCP tool."""
    name: str
    descriptor: Tool
    params_model: Type[ToolParams]
    handler: BoundHandler

    @property
    def description(self) -> str:
        return self.descriptor.description or ""

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.descriptor.inputSchema


def mcp_tool(name: Optional[str] = None, params: Type[ToolParams] = NoParams):
    """
    Mark an async handler as the implementation of an MCP tool.

    Usage:
        @mcp_tool("analyze_context", params=AnalyzeContextParams)
        async def handle_analyze_context(system, params) -> ToolResult:
            ...

    Args:
        name: Tool name (defaults to function name without 'handle_' prefix)
        params: Parameter model the dispatcher validates arguments into
    """
    def decorator(func: ToolHandler) -> ToolHandler:
        tool_name = name or func.__name__.replace("handle_", "", 1)

        func._mcp_tool_name = tool_name
        func._mcp_params_model = params
        return func
    return decorator


def get_tool_name(handler: Callable) -> Optional[str]:
    return getattr(handler, "_mcp_tool_name", None)


def get_params_model(handler: Callable) -> Type[ToolParams]:
    return getattr(handler, "_mcp_params_model", NoParams)
