from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from chronus_ai.core.config import ProviderConfig
from chronus_ai.llm.prompts import TemplateResolver
from chronus_ai.services.chat_service import ChatService

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent"


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class FakeSession:
    """Records POSTs and replays a canned response (or raises)."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def openai_envelope(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def gemini_envelope(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def make_service(
    config: ProviderConfig | None,
    session: FakeSession | None,
    template_dir: Path,
) -> ChatService:
    return ChatService(
        provider_config=config,
        template_resolver=TemplateResolver(template_dir),
        session=session,
    )
