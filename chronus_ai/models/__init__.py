"""
Models module - Pydantic schemas for data validation.
"""
from chronus_ai.models.chat import (
    ChatRequest,
    ChatResult,
    Suggestion,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResult",
    "Suggestion",
    "HealthResponse",
    "ErrorResponse",
]
