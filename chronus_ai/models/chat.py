"""
Request and Response models for the assistant chat API.

These Pydantic models define the contract between client and server,
and ChatResult doubles as the canonical result every provider response
is normalized into.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


Priority = Literal["high", "medium", "low"]


class ChatRequest(BaseModel):
    """
    Request model for the /api/ai/chat endpoint.

    Attributes:
        message: The user's free-text request.
        mode: Planning mode label (e.g. 'todo', 'study', 'final'),
            case-insensitive.
    """
    message: str = Field(
        ...,
        min_length=1,
        description="The user's message",
        examples=["Help me prepare for the linear algebra final next week"]
    )
    mode: str = Field(
        default="todo",
        description="Planning mode: selects the instruction template and tags suggestions",
        examples=["study"]
    )


class Suggestion(BaseModel):
    """A single task the assistant proposes to add to the calendar."""
    model_config = ConfigDict(frozen=True)

    name: str
    duration: int = Field(..., ge=0, description="Estimated duration in minutes")
    mode: str
    priority: Priority
    reason: str

    @field_validator("priority", mode="before")
    @classmethod
    def _lowercase_priority(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("duration", mode="before")
    @classmethod
    def _reject_boolean_duration(cls, value):
        # bool is an int subclass; JSON true must not become 1 minute
        if isinstance(value, bool):
            raise ValueError("duration must be a number of minutes")
        return value


class ChatResult(BaseModel):
    """
    Canonical assistant output.

    Both real provider responses and the offline fallback produce this
    shape; it is also the /api/ai/chat response body.
    """
    reply: str = Field(..., description="Natural-language answer")
    suggestions: List[Suggestion] = Field(
        default_factory=list,
        description="Tasks derived from the request, possibly empty"
    )


class HealthResponse(BaseModel):
    """Response model for the /health endpoints."""
    status: str = Field(default="healthy")
    version: str
    provider: Optional[str] = Field(
        default=None,
        description="Selected provider ('openai', 'gemini') or 'fallback'"
    )
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    message: str
    details: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
