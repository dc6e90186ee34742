"""
Provider Adapters - Request building and envelope parsing per upstream API.

Each adapter knows one provider's wire format:
- build_request(): instruction + user message -> ProviderRequest
- parse_response(): provider JSON envelope -> inner text (expected JSON)

The adapter is chosen from the configured endpoint URL by
select_adapter(). Supporting a new provider means adding an adapter
class and a detection rule to PROVIDER_RULES.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from chronus_ai.core.config import ProviderConfig
from chronus_ai.core.exceptions import ProviderShapeError
from chronus_ai.llm.normalizer import strip_code_fences


@dataclass(frozen=True)
class ProviderRequest:
    """A single outbound POST to a provider."""
    url: str
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)


def _first(items: Any, what: str, provider: str) -> Any:
    if not isinstance(items, list) or not items:
        raise ProviderShapeError(f"Missing or empty '{what}' in response", provider=provider)
    return items[0]


def _field(obj: Any, key: str, provider: str) -> Any:
    if not isinstance(obj, dict) or key not in obj or obj[key] is None:
        raise ProviderShapeError(f"Missing '{key}' in response", provider=provider)
    return obj[key]


def _text(value: Any, what: str, provider: str) -> str:
    if not isinstance(value, str):
        raise ProviderShapeError(f"'{what}' is not a string", provider=provider)
    return value


class ProviderAdapter(ABC):
    """Interface shared by all upstream chat-completion providers."""

    name: str = "provider"

    @abstractmethod
    def build_request(
        self,
        instruction_text: str,
        user_message: str,
        config: ProviderConfig,
    ) -> ProviderRequest:
        """Build the provider-specific request."""

    @abstractmethod
    def parse_response(self, raw_body: Any) -> str:
        """
        Extract the model's text from the provider envelope.

        Raises:
            ProviderShapeError: If the expected envelope fields are missing
        """


class OpenAIAdapter(ProviderAdapter):
    """
    OpenAI-style chat completions (also Groq, OpenRouter, vLLM, ...).

    Request:  {model, messages: [system, user], temperature}
    Auth:     Authorization: Bearer <api_key>
    Response: choices[0].message.content
    """

    name = "openai"

    def build_request(self, instruction_text, user_message, config):
        return ProviderRequest(
            url=config.endpoint_url,
            headers={"Authorization": f"Bearer {config.api_key}"},
            body={
                "model": config.model,
                "messages": [
                    {"role": "system", "content": instruction_text},
                    {"role": "user", "content": user_message},
                ],
                "temperature": config.temperature,
            },
        )

    def parse_response(self, raw_body):
        choice = _first(_field(raw_body, "choices", self.name), "choices", self.name)
        message = _field(choice, "message", self.name)
        content = _field(message, "content", self.name)
        return _text(content, "choices[0].message.content", self.name)


class GeminiAdapter(ProviderAdapter):
    """
    Google Gemini generateContent.

    Gemini has no system role on this endpoint, so the instruction text
    is prepended to the user message in a single text part.

    Request:  {contents: [{parts: [{text}]}]}
    Auth:     ?key=<api_key> query parameter
    Response: candidates[0].content.parts[0].text (may be ```json fenced)
    """

    name = "gemini"

    def build_request(self, instruction_text, user_message, config):
        combined = f"{instruction_text}\n\nUser Request: {user_message}"
        return ProviderRequest(
            url=config.endpoint_url,
            params={"key": config.api_key},
            body={"contents": [{"parts": [{"text": combined}]}]},
        )

    def parse_response(self, raw_body):
        candidate = _first(_field(raw_body, "candidates", self.name), "candidates", self.name)
        content = _field(candidate, "content", self.name)
        part = _first(_field(content, "parts", self.name), "parts", self.name)
        text = _text(_field(part, "text", self.name), "candidates[0].content.parts[0].text", self.name)
        return strip_code_fences(text)


# Ordered detection rules: first rule whose token appears in the URL wins
PROVIDER_RULES: List[Tuple[Sequence[str], Type[ProviderAdapter]]] = [
    (("google", "gemini"), GeminiAdapter),
]
DEFAULT_ADAPTER: Type[ProviderAdapter] = OpenAIAdapter


def classify_endpoint(endpoint_url: Optional[str]) -> Type[ProviderAdapter]:
    """Pick the adapter class for an endpoint URL."""
    url = (endpoint_url or "").lower()
    for tokens, adapter_cls in PROVIDER_RULES:
        if any(token in url for token in tokens):
            return adapter_cls
    return DEFAULT_ADAPTER


def select_adapter(endpoint_url: Optional[str]) -> ProviderAdapter:
    """Instantiate the adapter for an endpoint URL."""
    return classify_endpoint(endpoint_url)()
