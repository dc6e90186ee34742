"""
Custom Exceptions - Application-specific error classes.

Provider-side errors (ConfigMissingError, TransportError,
ProviderShapeError, FormatError) never reach the HTTP caller: the chat
service converts every one of them into the offline fallback result.
They still carry a status code and error code so they can be rendered
by the API layer's exception handlers if raised elsewhere.
"""
from typing import Optional


class ChatbotException(Exception):
    """
    Base exception for all assistant errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(ChatbotException):
    """Raised when input validation fails."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class ConfigMissingError(ChatbotException):
    """Raised when no provider endpoint/key is configured."""
    status_code = 503
    error_code = "provider_not_configured"

    def __init__(self, message: str = "AI provider is not configured"):
        super().__init__(message)


class TransportError(ChatbotException):
    """Raised on network failure, timeout, or a non-2xx provider response."""
    status_code = 502
    error_code = "provider_unreachable"

    def __init__(self, message: str = "AI provider request failed", status: Optional[int] = None):
        super().__init__(message, details=f"status={status}" if status is not None else None)
        self.status = status


class ProviderShapeError(ChatbotException):
    """Raised when a provider envelope lacks the expected fields."""
    status_code = 502
    error_code = "provider_shape_error"

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message, details=f"provider={provider}" if provider else None)
        self.provider = provider


class FormatError(ChatbotException):
    """Raised when the model output is not valid ChatResult JSON."""
    status_code = 502
    error_code = "format_error"

    def __init__(self, message: str = "Model output is not valid JSON"):
        super().__init__(message)
