"""
Parameter models for MKP tools.

These models are what the validator parses arguments into; the JSON schemas
advertised through list_tools live in mkp_server.tool_schemas and must agree
with the required/optional split here.
"""

from pydantic import BaseModel, ConfigDict, Field

from mkp_server.config import MKPConfig


class ToolParams(BaseModel):
    """Base for all tool parameter models. Unknown arguments are ignored."""
    model_config = ConfigDict(extra="ignore", frozen=True)


class NoParams(ToolParams):
    """Parameters for tools that take no arguments"""
    pass


class TriggerConversationParams(ToolParams):
    """Parameters for trigger_conversation"""
    user_input: str = Field(..., description="User input to trigger MKP conversation analysis")
    user_profile: str = Field(
        default=MKPConfig.DEFAULT_USER_PROFILE,
        description="Optional user profile data as JSON string",
    )


class AnalyzeContextParams(ToolParams):
    """Parameters for analyze_context"""
    context: str = Field(..., description="Context to analyze with MKP system")


class EnhanceCognitionParams(ToolParams):
    """Parameters for enhance_cognition"""
    domain: str = Field(..., description="Domain for cognitive enhancement")
    task: str = Field(..., description="Specific task requiring enhancement")
