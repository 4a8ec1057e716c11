"""
MKP Cognitive Enhancement Server - Configuration

Static constants only. Nothing here is read from the environment.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class MKPConfig:
    """Configuration for the MKP MCP server"""

    # =================================================================
    # Server identity
    # =================================================================
    SERVER_NAME = "mkp-mcp-server"
    SERVER_VERSION = "1.0.0"
    READY_MESSAGE = "MKP MCP Server running on stdio"

    # =================================================================
    # trigger_conversation
    # =================================================================
    # Input length (chars) below which a conversation is "low"/"medium"
    LOW_COMPLEXITY_MAX_CHARS = 50
    MEDIUM_COMPLEXITY_MAX_CHARS = 150

    # Reasoning switches from "focused" to "deep" above this length
    DEEP_ANALYSIS_MIN_CHARS = 100

    # Simulated processing time, milliseconds [low, high)
    PROCESSING_TIME_MS: Tuple[float, float] = (50.0, 250.0)

    # Inclusive integer ranges
    KNOWLEDGE_GAPS_RANGE: Tuple[int, int] = (1, 5)
    MCPS_GENERATED_RANGE: Tuple[int, int] = (1, 3)
    ENHANCED_CAPABILITIES_RANGE: Tuple[int, int] = (1, 3)
    REASONING_LINES_RANGE: Tuple[int, int] = (1, 3)
    SUGGESTION_LINES_RANGE: Tuple[int, int] = (1, 2)

    DEFAULT_USER_PROFILE = "{}"

    # =================================================================
    # get_system_status
    # =================================================================
    ACTIVE_CONNECTIONS_RANGE: Tuple[int, int] = (1, 10)
    PROCESSING_CAPACITY_RANGE: Tuple[int, int] = (60, 99)

    # =================================================================
    # analyze_context
    # =================================================================
    CHARS_PER_COMPLEXITY_POINT = 100
    COMPLEXITY_MIN = 1
    COMPLEXITY_MAX = 10
    SYSTEMATIC_BREAKDOWN_ABOVE = 7
    STRUCTURED_ANALYSIS_ABOVE = 4
    MIN_TOPIC_LENGTH = 4
    MAX_KEY_TOPICS = 5
    MAX_KNOWLEDGE_GAPS = 3

    # =================================================================
    # enhance_cognition
    # =================================================================
    ENHANCEMENT_DURATION = "1-2 hours"
    EFFECTIVENESS_RANGE: Tuple[int, int] = (70, 99)

