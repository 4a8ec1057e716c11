"""
Tool registry construction and dispatch.

build_tool_registry() pairs every advertised descriptor with exactly one
decorated handler and binds the provider instance. ToolDispatcher holds that
mapping and turns each call into exactly one CallToolResult.
"""

import time
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence

from mcp.types import CallToolResult, Tool

from mkp_server.logging_utils import get_logger
from mkp_server.tool_schemas import get_tool_definitions

from .analysis import handle_analyze_context, handle_enhance_cognition
from .conversation import handle_trigger_conversation
from .decorators import ToolDefinition, get_params_model, get_tool_name
from .error_helpers import ToolResult, system_error, tool_not_found_error
from .system import handle_get_capabilities, handle_get_system_status
from .utils import to_call_tool_result
from .validators import validate_params

logger = get_logger(__name__)

TOOL_HANDLERS: Sequence[Callable] = (
    handle_trigger_conversation,
    handle_get_system_status,
    handle_get_capabilities,
    handle_analyze_context,
    handle_enhance_cognition,
)


def build_tool_registry(
    system: Any,
    handlers: Iterable[Callable] = TOOL_HANDLERS,
    descriptors: Optional[Iterable[Tool]] = None,
) -> Mapping[str, ToolDefinition]:
    """
    Build the read-only tool registry.

    Args:
        system: Capability provider passed as the first argument to every handler
        handlers: @mcp_tool-decorated handlers
        descriptors: Tool descriptors to expose (defaults to get_tool_definitions())

    Raises:
        ValueError: if a descriptor has no handler, a handler has no
            descriptor, or a name appears twice.
    """
    by_name: Dict[str, Callable] = {}
    for handler in handlers:
        name = get_tool_name(handler)
        if name is None:
            raise ValueError(f"Handler {handler.__name__} is not decorated with @mcp_tool")
        if name in by_name:
            raise ValueError(f"Duplicate handler for tool '{name}'")
        by_name[name] = handler

    registry: Dict[str, ToolDefinition] = {}
    for descriptor in (descriptors if descriptors is not None else get_tool_definitions()):
        if descriptor.name in registry:
            raise ValueError(f"Duplicate descriptor for tool '{descriptor.name}'")
        handler = by_name.pop(descriptor.name, None)
        if handler is None:
            raise ValueError(f"No handler registered for tool '{descriptor.name}'")
        registry[descriptor.name] = ToolDefinition(
            name=descriptor.name,
            descriptor=descriptor,
            params_model=get_params_model(handler),
            handler=partial(handler, system),
        )

    if by_name:
        raise ValueError(f"Handlers without descriptors: {sorted(by_name)}")

    return MappingProxyType(registry)


class ToolDispatcher:
    """Routes tool calls through lookup, validation and execution."""

    def __init__(self, registry: Mapping[str, ToolDefinition]):
        self._registry = registry

    @property
    def registry(self) -> Mapping[str, ToolDefinition]:
        return self._registry

    def list_tools(self) -> list[Tool]:
        return [tool.descriptor for tool in self._registry.values()]

    async def execute(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        """Run one call and return the handler's result, never raising."""
        tool = self._registry.get(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: '{name}'")
            return tool_not_found_error(name)

        params, error = validate_params(tool.params_model, arguments)
        if error is not None:
            logger.warning(f"Invalid arguments for '{name}': {error.message}")
            return error

        try:
            return await tool.handler(params)
        except Exception as e:
            logger.error(f"Tool '{name}' error: {e}", exc_info=True)
            return system_error(e)

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]]) -> CallToolResult:
        """Handle a call_tool request end to end."""
        start_time = time.perf_counter()
        result = await self.execute(name, arguments)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        outcome = result.kind.value if result.is_error else "ok"
        logger.debug(f"Tool '{name}' finished in {elapsed_ms:.1f}ms ({outcome})")
        return to_call_tool_result(result)
