"""
Common utilities for MCP tool handlers.
"""

from typing import Iterable

from mcp.types import CallToolResult, TextContent

from .error_helpers import ToolResult


def text_content(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def success_response(text: str) -> CallToolResult:
    """Wrap rendered tool output in a single text block."""
    return CallToolResult(content=[text_content(text)], isError=False)


def error_response(message: str) -> CallToolResult:
    """
    Create an error-flagged response.

    The text is always ``Error: <message>`` so clients that ignore
    ``isError`` still see the failure.
    """
    return CallToolResult(content=[text_content(f"Error: {message}")], isError=True)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    if result.is_error:
        return error_response(result.message)
    return success_response(result.text)


def bullet_list(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def online_flag(value: bool) -> str:
    return "✅ Online" if value else "❌ Offline"
