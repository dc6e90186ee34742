"""
Response Normalizer - Turn model output text into a ChatResult.

Models are asked for bare JSON but often wrap it in a markdown code
fence (```json ... ```). Fence markers are stripped before parsing; the
JSON is then validated strictly against the ChatResult shape.
"""
import json
import re

from pydantic import ValidationError as PydanticValidationError

from chronus_ai.core.exceptions import FormatError
from chronus_ai.core.logging_config import get_logger
from chronus_ai.models.chat import ChatResult

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers and surrounding whitespace."""
    return _FENCE_RE.sub("", text).strip()


def normalize(text: str) -> ChatResult:
    """
    Parse model output into the canonical ChatResult.

    Args:
        text: Raw text extracted from the provider envelope

    Returns:
        Validated ChatResult (extra keys ignored, missing suggestions = [])

    Raises:
        FormatError: If the text is not JSON or does not match the shape
    """
    if not isinstance(text, str):
        raise FormatError(f"Expected text, got {type(text).__name__}")

    cleaned = strip_code_fences(text)
    if not cleaned:
        raise FormatError("Model returned an empty response")

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.debug(f"Unparseable model output: {cleaned[:200]!r}")
        raise FormatError(f"Model output is not valid JSON: {e.msg}") from e

    if not isinstance(payload, dict):
        raise FormatError(f"Expected a JSON object, got {type(payload).__name__}")

    try:
        return ChatResult.model_validate(payload)
    except PydanticValidationError as e:
        raise FormatError(
            f"Model output does not match the reply/suggestions shape "
            f"({e.error_count()} error(s))"
        ) from e
