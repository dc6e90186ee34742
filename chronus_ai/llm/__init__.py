"""
LLM module - Language model integration.

This module handles all upstream model interactions:
- Instruction templates (prompts/)
- Provider adapters and selection (providers.py)
- HTTP transport (client.py)
- Response normalization (normalizer.py)
"""
from chronus_ai.llm.client import send_request
from chronus_ai.llm.normalizer import normalize, strip_code_fences
from chronus_ai.llm.providers import (
    ProviderAdapter,
    ProviderRequest,
    OpenAIAdapter,
    GeminiAdapter,
    classify_endpoint,
    select_adapter,
)

__all__ = [
    "send_request",
    "normalize",
    "strip_code_fences",
    "ProviderAdapter",
    "ProviderRequest",
    "OpenAIAdapter",
    "GeminiAdapter",
    "classify_endpoint",
    "select_adapter",
]
