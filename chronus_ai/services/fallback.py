"""
Fallback Generator - Deterministic offline answer.

Used whenever no provider is configured or a provider call fails, so the
UI always gets a renderable result. Pure: same input, same output.
"""
from chronus_ai.models.chat import ChatResult, Suggestion

FALLBACK_DURATION_MINUTES = 30
FALLBACK_PRIORITY = "medium"
FALLBACK_REASON = "Generated by fallback logic"


def generate_fallback(message: str, mode: str) -> ChatResult:
    """Build the simulated reply with one sample task for ``message``."""
    return ChatResult(
        reply=(
            "I'm simulating a response because the AI API is not configured "
            f"or reachable. (Mode: {mode})"
        ),
        suggestions=[
            Suggestion(
                name=f"Sample Task from {message}",
                duration=FALLBACK_DURATION_MINUTES,
                mode=mode,
                priority=FALLBACK_PRIORITY,
                reason=FALLBACK_REASON,
            )
        ],
    )
