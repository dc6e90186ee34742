"""
Input Validators - Sanitization utilities for inbound chat requests.
"""
import re
from typing import Optional, Tuple

from chronus_ai.core.logging_config import get_logger

logger = get_logger(__name__)

MAX_MESSAGE_LENGTH = 4000
DEFAULT_MODE = "todo"


def sanitize_message(message: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """
    Sanitize a user message.

    - Removes null bytes
    - Strips leading/trailing whitespace
    - Collapses runs of spaces and tabs (newlines are kept, the web
      client sends multi-line context blocks)
    - Limits length

    Args:
        message: Raw user message
        max_length: Maximum allowed length

    Returns:
        Sanitized message
    """
    if not message:
        return ""

    cleaned = message.replace("\x00", "")
    cleaned = cleaned.strip()
    cleaned = re.sub(r"[ \t]+", " ", cleaned)

    if len(cleaned) > max_length:
        logger.debug(f"Truncating message from {len(cleaned)} to {max_length} characters")
        cleaned = cleaned[:max_length]

    return cleaned


def normalize_mode(mode: Optional[str]) -> str:
    """Strip the mode label, substituting the default mode when blank."""
    if mode is None or not mode.strip():
        return DEFAULT_MODE
    return mode.strip()


def validate_message(message: str) -> Tuple[bool, str, Optional[str]]:
    """
    Full validation and sanitization of a message.

    Args:
        message: Raw user message

    Returns:
        Tuple of (is_valid, sanitized_message, error_message)
    """
    if not message or not message.strip():
        return False, "", "Message cannot be empty"

    sanitized = sanitize_message(message)

    if not sanitized:
        return False, "", "Message cannot be empty after sanitization"

    return True, sanitized, None
