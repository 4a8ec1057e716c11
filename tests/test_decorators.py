"""
Tests for mkp_server/mcp_handlers/decorators.py and build_tool_registry().

The decorator only attaches metadata; the registry builder enforces the
one-descriptor-one-handler invariant.
"""

import sys
from pathlib import Path

import pytest
from mcp.types import Tool

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mkp_server.mcp_handlers import TOOL_HANDLERS, build_tool_registry, mcp_tool
from mkp_server.mcp_handlers.decorators import get_params_model, get_tool_name
from mkp_server.mcp_handlers.error_helpers import ToolSuccess
from mkp_server.mcp_handlers.schemas import AnalyzeContextParams, NoParams


def _descriptor(name):
    return Tool(name=name, description=f"{name} tool", inputSchema={"type": "object", "properties": {}})


class TestMcpToolDecorator:

    def test_explicit_name(self):
        @mcp_tool("alpha_tool")
        async def handle_something(system, params):
            return ToolSuccess("")

        assert get_tool_name(handle_something) == "alpha_tool"

    def test_auto_name_from_function(self):
        @mcp_tool()
        async def handle_my_auto_tool(system, params):
            return ToolSuccess("")

        assert get_tool_name(handle_my_auto_tool) == "my_auto_tool"

    def test_params_model(self):
        @mcp_tool("ctx", params=AnalyzeContextParams)
        async def handle_ctx(system, params):
            return ToolSuccess("")

        assert get_params_model(handle_ctx) is AnalyzeContextParams

    def test_default_params_model(self):
        @mcp_tool("bare")
        async def handle_bare(system, params):
            return ToolSuccess("")

        assert get_params_model(handle_bare) is NoParams

    def test_returns_original_function(self):
        async def handle_plain(system, params):
            return ToolSuccess("")

        assert mcp_tool("plain")(handle_plain) is handle_plain

    def test_undecorated_has_no_name(self):
        async def handle_plain(system, params):
            return ToolSuccess("")

        assert get_tool_name(handle_plain) is None


class TestBuildToolRegistry:

    def test_default_registry_has_five_tools_in_order(self, registry):
        assert list(registry) == [
            "trigger_conversation",
            "get_system_status",
            "get_capabilities",
            "analyze_context",
            "enhance_cognition",
        ]

    def test_registry_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry["new_tool"] = None

    def test_every_handler_is_decorated(self):
        names = [get_tool_name(h) for h in TOOL_HANDLERS]
        assert None not in names
        assert len(names) == len(set(names))

    @pytest.mark.asyncio
    async def test_binds_system(self):
        seen = []

        @mcp_tool("echo_system")
        async def handle_echo_system(system, params):
            seen.append(system)
            return ToolSuccess("ok")

        sentinel = object()
        registry = build_tool_registry(sentinel, [handle_echo_system], [_descriptor("echo_system")])
        await registry["echo_system"].handler(NoParams())
        assert seen == [sentinel]

    def test_descriptor_without_handler_rejected(self):
        with pytest.raises(ValueError, match="No handler registered for tool 'orphan'"):
            build_tool_registry(object(), [], [_descriptor("orphan")])

    def test_handler_without_descriptor_rejected(self):
        @mcp_tool("extra")
        async def handle_extra(system, params):
            return ToolSuccess("")

        with pytest.raises(ValueError, match="Handlers without descriptors"):
            build_tool_registry(object(), [handle_extra], [])

    def test_duplicate_handler_rejected(self):
        @mcp_tool("dup")
        async def handle_a(system, params):
            return ToolSuccess("")

        @mcp_tool("dup")
        async def handle_b(system, params):
            return ToolSuccess("")

        with pytest.raises(ValueError, match="Duplicate handler"):
            build_tool_registry(object(), [handle_a, handle_b], [_descriptor("dup")])

    def test_duplicate_descriptor_rejected(self):
        @mcp_tool("dup")
        async def handle_dup(system, params):
            return ToolSuccess("")

        with pytest.raises(ValueError, match="Duplicate descriptor"):
            build_tool_registry(object(), [handle_dup], [_descriptor("dup"), _descriptor("dup")])

    def test_undecorated_handler_rejected(self):
        async def handle_plain(system, params):
            return ToolSuccess("")

        with pytest.raises(ValueError, match="not decorated"):
            build_tool_registry(object(), [handle_plain], [])

    def test_definition_exposes_descriptor(self, registry):
        tool = registry["analyze_context"]
        assert tool.description == "Analyze specific context with MKP system"
        assert tool.input_schema["required"] == ["context"]
        assert tool.params_model is AnalyzeContextParams
