"""
Chat Service - Orchestrates one assistant request.

Flow for chat(message, mode):
1. Provider not configured (no URL/key, or the FAKE_KEY sentinel)
   -> offline fallback
2. Resolve the instruction template for the mode
3. Pick the provider adapter from the endpoint URL
4. Build, send, unwrap the envelope, normalize into a ChatResult
5. Any failure in 2-4 -> offline fallback

The caller always gets a ChatResult: provider errors are logged here and
never propagated, since the planning UI cannot render a raw upstream
error. No retries are attempted.
"""
from typing import Optional

import requests

from chronus_ai.core.config import ProviderConfig, get_settings
from chronus_ai.core.exceptions import (
    ConfigMissingError,
    FormatError,
    ProviderShapeError,
    TransportError,
)
from chronus_ai.core.logging_config import get_logger
from chronus_ai.llm.client import send_request
from chronus_ai.llm.normalizer import normalize
from chronus_ai.llm.prompts import TemplateResolver
from chronus_ai.llm.providers import select_adapter
from chronus_ai.models.chat import ChatResult
from chronus_ai.services.fallback import generate_fallback

logger = get_logger(__name__)


class ChatService:
    """
    Stateless entry point used by the web layer.

    Example:
        >>> service = ChatService(ProviderConfig())      # unconfigured
        >>> service.chat("Plan my week", "todo").reply
        "I'm simulating a response because the AI API is not configured or reachable. (Mode: todo)"
    """

    def __init__(
        self,
        provider_config: Optional[ProviderConfig] = None,
        template_resolver: Optional[TemplateResolver] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the chat service.

        Args:
            provider_config: Upstream provider settings. None means
                "not configured" and every call falls back.
            template_resolver: Instruction template source.
            session: Optional HTTP session for outbound calls.
        """
        self.provider_config = provider_config
        self.template_resolver = template_resolver or TemplateResolver()
        self.session = session

    @property
    def provider_name(self) -> str:
        """Name of the provider calls go to, or 'fallback'."""
        if not self._is_configured():
            return "fallback"
        return select_adapter(self.provider_config.endpoint_url).name

    def chat(self, message: str, mode: str) -> ChatResult:
        """
        Answer a user message for a mode. Never raises.

        Args:
            message: The user's request text
            mode: Planning mode label

        Returns:
            The provider's normalized answer, or the offline fallback
        """
        try:
            return self._call_provider(message, mode)
        except ConfigMissingError:
            logger.info(f"AI provider not configured, using fallback (mode={mode})")
        except (TransportError, ProviderShapeError, FormatError) as e:
            logger.warning(f"AI provider call failed ({e.error_code}): {e.message}; using fallback")
        except Exception as e:
            logger.exception(f"Unexpected error calling AI provider: {e}; using fallback")
        return generate_fallback(message, mode)

    def _is_configured(self) -> bool:
        return self.provider_config is not None and self.provider_config.is_configured

    def _call_provider(self, message: str, mode: str) -> ChatResult:
        if not self._is_configured():
            raise ConfigMissingError()
        config = self.provider_config

        instruction = self.template_resolver.resolve(mode)
        adapter = select_adapter(config.endpoint_url)
        request = adapter.build_request(instruction, message, config)

        logger.info(f"Calling {adapter.name} provider: mode={mode}, message_length={len(message)}")
        envelope = send_request(request, timeout=config.timeout_seconds, session=self.session)
        result = normalize(adapter.parse_response(envelope))

        logger.info(f"{adapter.name} provider answered with {len(result.suggestions)} suggestion(s)")
        return result


_chat_service: Optional[ChatService] = None


def get_chat_service() -> ChatService:
    """Get or create the process-wide chat service from settings."""
    global _chat_service
    if _chat_service is None:
        settings = get_settings()
        _chat_service = ChatService(
            provider_config=settings.provider_config(),
            template_resolver=TemplateResolver(settings.prompt_dir),
        )
        logger.info(f"ChatService initialized (provider={_chat_service.provider_name})")
    return _chat_service
