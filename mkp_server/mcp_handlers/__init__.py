"""
MCP Tool Handlers

Decorated handler functions, their parameter models, and the dispatcher that
routes calls to them.
"""

from .dispatch import TOOL_HANDLERS, ToolDispatcher, build_tool_registry
from .decorators import ToolDefinition, mcp_tool
from .error_helpers import ErrorKind, ToolFailure, ToolResult, ToolSuccess

__all__ = [
    "TOOL_HANDLERS",
    "ToolDispatcher",
    "build_tool_registry",
    "ToolDefinition",
    "mcp_tool",
    "ErrorKind",
    "ToolFailure",
    "ToolResult",
    "ToolSuccess",
]
