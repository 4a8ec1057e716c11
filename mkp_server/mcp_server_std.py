#!/usr/bin/env python3
"""
MKP Cognitive Enhancement MCP Server - Standard MCP Protocol Implementation

Serves the MKP tools over stdio using the MCP Python SDK.

Usage:
    mkp-mcp-server
    python -m mkp_server

Configuration:
    Add to the MCP config of Claude Desktop, Cursor, or any MCP-compatible client
"""

import asyncio
import sys
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from mkp_server.config import MKPConfig
from mkp_server.cognitive_system import MockMKPSystem
from mkp_server.logging_utils import configure_logging, get_logger
from mkp_server.mcp_handlers import ToolDispatcher, build_tool_registry

logger = get_logger(__name__)


def create_dispatcher(system: Optional[MockMKPSystem] = None) -> ToolDispatcher:
    """Build the registry once and hand it to a dispatcher."""
    registry = build_tool_registry(system if system is not None else MockMKPSystem())
    return ToolDispatcher(registry)


def create_server(dispatcher: Optional[ToolDispatcher] = None) -> Server:
    """Create the MCP server with list_tools/call_tool wired to the dispatcher."""
    if dispatcher is None:
        dispatcher = create_dispatcher()

    server = Server(MKPConfig.SERVER_NAME, version=MKPConfig.SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available MCP tools"""
        return dispatcher.list_tools()

    # Argument checking is done by the dispatcher's validator
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Handle tool calls from MCP client"""
        return await dispatcher.dispatch(name, arguments)

    return server


async def main() -> None:
    """Main entry point for MCP server"""
    configure_logging()
    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        logger.info(MKPConfig.READY_MESSAGE)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run() -> None:
    """Console script entry point. Exits 1 on a startup or transport fault."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.critical(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
