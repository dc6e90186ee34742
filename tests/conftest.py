from __future__ import annotations

from pathlib import Path

import pytest
import requests

from chronus_ai.core.config import ProviderConfig
from tests.helpers import GEMINI_URL, OPENAI_URL


@pytest.fixture(autouse=True)
def _block_real_network(monkeypatch: pytest.MonkeyPatch) -> None:
    def _blocked(*_args, **_kwargs):
        raise AssertionError("Real outbound network is blocked in tests; inject a FakeSession.")

    monkeypatch.setattr(requests.Session, "request", _blocked)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    (tmp_path / "system-prompt.txt").write_text("Generic planner for {mode}.", encoding="utf-8")
    (tmp_path / "system-prompt-study.txt").write_text("Study planner.", encoding="utf-8")
    return tmp_path


@pytest.fixture
def openai_config() -> ProviderConfig:
    return ProviderConfig(endpoint_url=OPENAI_URL, api_key="sk-test", timeout_seconds=5)


@pytest.fixture
def gemini_config() -> ProviderConfig:
    return ProviderConfig(endpoint_url=GEMINI_URL, api_key="g-test", timeout_seconds=5)
