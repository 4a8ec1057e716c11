"""
MKP Cognitive System - mock capability provider

Produces the structured results behind every MKP tool. The values are
placeholders for a reasoning backend: counts and selections come from the
injected random source, the rest from fixed tables and simple text heuristics.

Every method is async to match the MCP calling convention; none of them await.
"""

import math
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Literal, Optional, Sequence, Tuple

from mkp_server.config import MKPConfig

Complexity = Literal["low", "medium", "high"]
SystemHealth = Literal["healthy", "degraded", "offline"]


# ============================================================================
# Fixed tables
# ============================================================================

CONVERSATION_CAPABILITIES: Tuple[str, ...] = (
    "domain expertise",
    "reasoning patterns",
    "contextual analysis",
    "knowledge synthesis",
    "pattern recognition",
)

CONVERSATION_STATUS = "Cognitive capabilities enhanced for this conversation."

SUGGESTIONS: Tuple[str, ...] = (
    "Consider exploring related sub-topics for comprehensive understanding",
    "May benefit from multi-perspective analysis approach",
    "Recommend systematic breakdown of complex elements",
    "Consider real-world application scenarios",
)

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
})

# Checked in order; first group with a keyword present wins
CONTEXT_TYPE_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("technical", ("code", "programming")),
    ("business", ("business", "strategy")),
    ("analytical", ("research", "analysis")),
)
DEFAULT_CONTEXT_TYPE = "general"

ENHANCEMENT_TYPES: Tuple[str, ...] = ("domain-specific", "pattern-based", "analytical", "creative")

DOMAIN_CAPABILITIES: Dict[str, Tuple[str, ...]] = {
    "technology": ("Technical Architecture", "System Design", "Code Analysis"),
    "business": ("Strategic Planning", "Market Analysis", "Process Optimization"),
    "science": ("Research Methodology", "Data Analysis", "Hypothesis Testing"),
    "creative": ("Ideation", "Design Thinking", "Innovation Patterns"),
}
FALLBACK_DOMAIN_CAPABILITIES: Tuple[str, ...] = ("General Problem Solving", "Analytical Thinking")


# ============================================================================
# Result types
# ============================================================================

@dataclass(frozen=True)
class InputAnalysis:
    input_length: int
    processing_time_ms: float
    complexity: Complexity


@dataclass(frozen=True)
class ProcessingResults:
    knowledge_gaps_detected: int
    mcps_generated: int
    enhanced_capabilities: Tuple[str, ...]


@dataclass(frozen=True)
class ConversationResult:
    """Result of trigger_conversation"""
    input_analysis: InputAnalysis
    processing_results: ProcessingResults
    status: str
    reasoning: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    user_profile: str = MKPConfig.DEFAULT_USER_PROFILE


@dataclass(frozen=True)
class ModuleStatus:
    reasoning_engine: bool = True
    knowledge_base: bool = True
    context_processor: bool = True
    enhancement_layer: bool = True


@dataclass(frozen=True)
class StatusResult:
    """Result of get_system_status"""
    system_health: SystemHealth
    active_connections: int
    processing_capacity: int
    last_update: str
    modules: ModuleStatus = field(default_factory=ModuleStatus)


@dataclass(frozen=True)
class CapabilitiesResult:
    """Result of get_capabilities"""
    core: Tuple[str, ...]
    enhanced: Tuple[str, ...]
    domain_expertise: Tuple[str, ...]
    reasoning_patterns: Tuple[str, ...]
    integrations: Tuple[str, ...]


@dataclass(frozen=True)
class AnalysisResult:
    """Result of analyze_context"""
    context_type: str
    complexity: int
    key_topics: Tuple[str, ...]
    recommended_approach: str
    knowledge_gaps: Tuple[str, ...]


@dataclass(frozen=True)
class EnhancementResult:
    """Result of enhance_cognition"""
    domain: str
    task: str
    enhancement_type: str
    capabilities: Tuple[str, ...]
    duration: str
    effectiveness: int


SYSTEM_CAPABILITIES = CapabilitiesResult(
    core=(
        "Conversation Analysis",
        "Context Processing",
        "Knowledge Gap Detection",
        "Capability Enhancement",
    ),
    enhanced=(
        "Domain Expertise Activation",
        "Advanced Reasoning Patterns",
        "Cross-Domain Knowledge Synthesis",
        "Adaptive Learning Integration",
    ),
    domain_expertise=(
        "Technology & Engineering",
        "Business Strategy",
        "Scientific Research",
        "Creative Problem Solving",
        "Systems Thinking",
    ),
    reasoning_patterns=(
        "Analytical Decomposition",
        "Systematic Integration",
        "Pattern Recognition",
        "Causal Reasoning",
        "Strategic Planning",
    ),
    integrations=(
        "MCP Protocol",
        "Claude Code Interface",
        "External Knowledge Sources",
        "Real-time Processing",
    ),
)


# ============================================================================
# Pure helpers
# ============================================================================

def classify_input_complexity(user_input: str) -> Complexity:
    """Bucket an input by length: <50 low, <150 medium, otherwise high."""
    length = len(user_input)
    if length < MKPConfig.LOW_COMPLEXITY_MAX_CHARS:
        return "low"
    if length < MKPConfig.MEDIUM_COMPLEXITY_MAX_CHARS:
        return "medium"
    return "high"


def reasoning_patterns(user_input: str) -> Tuple[str, ...]:
    depth = "deep" if len(user_input) > MKPConfig.DEEP_ANALYSIS_MIN_CHARS else "focused"
    return (
        f"Input complexity suggests {depth} analysis required",
        "Cross-referencing domain knowledge for optimal response generation",
        "Activating relevant cognitive enhancement modules",
        "Preparing contextual adaptation strategies",
    )


def extract_key_topics(context: str) -> List[str]:
    """
    Pull up to five candidate topics out of free text.

    Lower-cases, splits on whitespace, drops stop words and short tokens,
    then deduplicates keeping first-seen order.
    """
    topics: List[str] = []
    seen = set()
    for word in context.lower().split():
        if len(word) < MKPConfig.MIN_TOPIC_LENGTH or word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        topics.append(word)
        if len(topics) == MKPConfig.MAX_KEY_TOPICS:
            break
    return topics


def context_complexity(context: str) -> int:
    """clamp(floor(len / 100), 1, 10)"""
    score = math.floor(len(context) / MKPConfig.CHARS_PER_COMPLEXITY_POINT)
    return min(MKPConfig.COMPLEXITY_MAX, max(MKPConfig.COMPLEXITY_MIN, score))


def determine_context_type(context: str) -> str:
    for context_type, keywords in CONTEXT_TYPE_KEYWORDS:
        if any(keyword in context for keyword in keywords):
            return context_type
    return DEFAULT_CONTEXT_TYPE


def recommend_approach(complexity: int) -> str:
    if complexity > MKPConfig.SYSTEMATIC_BREAKDOWN_ABOVE:
        return "systematic-breakdown"
    if complexity > MKPConfig.STRUCTURED_ANALYSIS_ABOVE:
        return "structured-analysis"
    return "direct-response"


def identify_knowledge_gaps(topics: Sequence[str]) -> List[str]:
    return [f"{topic}-specific expertise" for topic in topics[:MKPConfig.MAX_KNOWLEDGE_GAPS]]


def get_domain_capabilities(domain: str) -> List[str]:
    """Case-insensitive domain lookup with a generic fallback."""
    return list(DOMAIN_CAPABILITIES.get(domain.lower(), FALLBACK_DOMAIN_CAPABILITIES))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Provider
# ============================================================================

class MockMKPSystem:
    """
    Placeholder MKP backend.

    Args:
        rng: Random source for every randomized field. Pass a seeded
            ``random.Random`` to pin outputs.
        clock: Zero-argument callable returning an aware datetime, used for
            status timestamps.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock or _utc_now

    def _randint(self, bounds: Tuple[int, int]) -> int:
        low, high = bounds
        return self._rng.randint(low, high)

    async def trigger_conversation(
        self,
        user_input: str,
        user_profile: str = MKPConfig.DEFAULT_USER_PROFILE,
    ) -> ConversationResult:
        low_ms, high_ms = MKPConfig.PROCESSING_TIME_MS
        processing_time = low_ms + self._rng.random() * (high_ms - low_ms)

        knowledge_gaps = self._randint(MKPConfig.KNOWLEDGE_GAPS_RANGE)
        mcps_generated = self._randint(MKPConfig.MCPS_GENERATED_RANGE)

        shuffled = list(CONVERSATION_CAPABILITIES)
        self._rng.shuffle(shuffled)
        enhanced = tuple(shuffled[:self._randint(MKPConfig.ENHANCED_CAPABILITIES_RANGE)])

        reasoning = reasoning_patterns(user_input)[:self._randint(MKPConfig.REASONING_LINES_RANGE)]
        suggestions = SUGGESTIONS[:self._randint(MKPConfig.SUGGESTION_LINES_RANGE)]

        return ConversationResult(
            input_analysis=InputAnalysis(
                input_length=len(user_input),
                processing_time_ms=processing_time,
                complexity=classify_input_complexity(user_input),
            ),
            processing_results=ProcessingResults(
                knowledge_gaps_detected=knowledge_gaps,
                mcps_generated=mcps_generated,
                enhanced_capabilities=enhanced,
            ),
            status=CONVERSATION_STATUS,
            reasoning=reasoning,
            suggestions=suggestions,
            user_profile=user_profile,
        )

    async def get_system_status(self) -> StatusResult:
        return StatusResult(
            system_health="healthy",
            active_connections=self._randint(MKPConfig.ACTIVE_CONNECTIONS_RANGE),
            processing_capacity=self._randint(MKPConfig.PROCESSING_CAPACITY_RANGE),
            last_update=self._clock().isoformat(),
            modules=ModuleStatus(),
        )

    async def get_capabilities(self) -> CapabilitiesResult:
        return SYSTEM_CAPABILITIES

    async def analyze_context(self, context: str) -> AnalysisResult:
        topics = extract_key_topics(context)
        complexity = context_complexity(context)
        return AnalysisResult(
            context_type=determine_context_type(context),
            complexity=complexity,
            key_topics=tuple(topics),
            recommended_approach=recommend_approach(complexity),
            knowledge_gaps=tuple(identify_knowledge_gaps(topics)),
        )

    async def enhance_cognition(self, domain: str, task: str) -> EnhancementResult:
        return EnhancementResult(
            domain=domain,
            task=task,
            enhancement_type=self._rng.choice(ENHANCEMENT_TYPES),
            capabilities=tuple(get_domain_capabilities(domain)),
            duration=MKPConfig.ENHANCEMENT_DURATION,
            effectiveness=self._randint(MKPConfig.EFFECTIVENESS_RANGE),
        )
