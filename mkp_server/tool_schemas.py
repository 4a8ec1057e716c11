"""
Tool Schema Definitions

Single source of truth for the MCP tool descriptors advertised by list_tools.
Order here is the order clients see.
"""

from mcp.types import Tool

from mkp_server.config import MKPConfig


def get_tool_definitions() -> list[Tool]:
    """Get MCP tool definitions."""
    return [
        Tool(
            name="trigger_conversation",
            description="Trigger MKP system for conversation analysis",
            inputSchema={
                "type": "object",
                "properties": {
                    "user_input": {
                        "type": "string",
                        "description": "User input to trigger MKP conversation analysis",
                    },
                    "user_profile": {
                        "type": "string",
                        "description": "Optional user profile data as JSON string",
                        "default": MKPConfig.DEFAULT_USER_PROFILE,
                    },
                },
                "required": ["user_input"],
            },
        ),
        Tool(
            name="get_system_status",
            description="Get detailed MKP system status and health information",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="get_capabilities",
            description="Get list of MKP system capabilities and features",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="analyze_context",
            description="Analyze specific context with MKP system",
            inputSchema={
                "type": "object",
                "properties": {
                    "context": {
                        "type": "string",
                        "description": "Context to analyze with MKP system",
                    },
                },
                "required": ["context"],
            },
        ),
        Tool(
            name="enhance_cognition",
            description="Request cognitive enhancement for specific domain and task",
            inputSchema={
                "type": "object",
                "properties": {
                    "domain": {
                        "type": "string",
                        "description": "Domain for cognitive enhancement",
                    },
                    "task": {
                        "type": "string",
                        "description": "Specific task requiring enhancement",
                    },
                },
                "required": ["domain", "task"],
            },
        ),
    ]
