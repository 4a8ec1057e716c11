"""
Text templates for MKP tool results.

One render function per tool. Output is plain text meant for humans and
models alike; lists become "- item" lines.
"""

from mkp_server.cognitive_system import (
    AnalysisResult,
    CapabilitiesResult,
    ConversationResult,
    EnhancementResult,
    StatusResult,
)

from .utils import bullet_list, online_flag


def render_conversation(result: ConversationResult) -> str:
    analysis = result.input_analysis
    processing = result.processing_results
    lines = [
        "MKP System Activated Successfully",
        "",
        "Input Analysis:",
        f"- Input Length: {analysis.input_length} characters",
        f"- Processing Time: {analysis.processing_time_ms:.1f}ms",
        f"- Complexity: {analysis.complexity}",
        "",
        "Processing Results:",
        f"- Knowledge Gaps Detected: {processing.knowledge_gaps_detected}",
        f"- MCPs Generated: {processing.mcps_generated}",
        f"- Enhanced Capabilities: {', '.join(processing.enhanced_capabilities)}",
        "",
        f"Status: {result.status}",
    ]
    if result.reasoning:
        lines += ["", "Reasoning:", bullet_list(result.reasoning)]
    if result.suggestions:
        lines += ["", "Suggestions:", bullet_list(result.suggestions)]
    return "\n".join(lines)


def render_status(status: StatusResult) -> str:
    modules = status.modules
    return "\n".join([
        "MKP System Status Report",
        "",
        f"System Health: {status.system_health.upper()}",
        f"Active Connections: {status.active_connections}",
        f"Processing Capacity: {status.processing_capacity}%",
        f"Last Update: {status.last_update}",
        "",
        "Module Status:",
        f"- Reasoning Engine: {online_flag(modules.reasoning_engine)}",
        f"- Knowledge Base: {online_flag(modules.knowledge_base)}",
        f"- Context Processor: {online_flag(modules.context_processor)}",
        f"- Enhancement Layer: {online_flag(modules.enhancement_layer)}",
    ])


def render_capabilities(capabilities: CapabilitiesResult) -> str:
    sections = [
        ("Core Capabilities", capabilities.core),
        ("Enhanced Capabilities", capabilities.enhanced),
        ("Domain Expertise", capabilities.domain_expertise),
        ("Reasoning Patterns", capabilities.reasoning_patterns),
        ("Integrations", capabilities.integrations),
    ]
    blocks = ["MKP System Capabilities"]
    for title, items in sections:
        blocks.append(f"{title}:\n{bullet_list(items)}")
    return "\n\n".join(blocks)


def render_analysis(analysis: AnalysisResult) -> str:
    topics = ", ".join(analysis.key_topics) if analysis.key_topics else "none"
    gaps = bullet_list(analysis.knowledge_gaps) if analysis.knowledge_gaps else "- none"
    return "\n".join([
        "MKP Context Analysis",
        "",
        f"Context Type: {analysis.context_type}",
        f"Complexity Level: {analysis.complexity}/10",
        f"Key Topics: {topics}",
        f"Recommended Approach: {analysis.recommended_approach}",
        "",
        "Knowledge Gaps Identified:",
        gaps,
    ])


def render_enhancement(enhancement: EnhancementResult) -> str:
    return "\n".join([
        "MKP Cognitive Enhancement Activated",
        "",
        f"Domain: {enhancement.domain}",
        f"Task: {enhancement.task}",
        f"Enhancement Type: {enhancement.enhancement_type}",
        f"Duration: {enhancement.duration}",
        f"Effectiveness: {enhancement.effectiveness}%",
        "",
        "Enhanced Capabilities:",
        bullet_list(enhancement.capabilities),
    ])
