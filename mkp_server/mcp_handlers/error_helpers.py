"""
Result types for MCP tool handlers.

Handlers return ToolSuccess or ToolFailure instead of raising, so every
expected failure mode is visible in the handler signature. The dispatcher
turns either variant into a CallToolResult.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    UNKNOWN_TOOL = "unknown_tool"
    UNEXPECTED = "unexpected_fault"


@dataclass(frozen=True)
class ToolSuccess:
    text: str

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class ToolFailure:
    kind: ErrorKind
    message: str

    @property
    def is_error(self) -> bool:
        return True


ToolResult = Union[ToolSuccess, ToolFailure]


def validation_error(message: str) -> ToolFailure:
    """Standard failure for missing or mistyped arguments"""
    return ToolFailure(ErrorKind.VALIDATION, message)


def tool_not_found_error(tool_name: str) -> ToolFailure:
    """Standard failure for a name absent from the registry"""
    return ToolFailure(ErrorKind.UNKNOWN_TOOL, f"Unknown tool: {tool_name}")


def system_error(error: BaseException) -> ToolFailure:
    """Standard failure for anything a handler raised"""
    return ToolFailure(ErrorKind.UNEXPECTED, str(error) or UNKNOWN_ERROR_MESSAGE)
