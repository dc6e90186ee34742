from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient

from chronus_ai.api.main import app
from chronus_ai.core.config import ProviderConfig
from chronus_ai.services.chat_service import get_chat_service
from tests.helpers import FakeResponse, FakeSession, make_service, openai_envelope

client = TestClient(app)


@pytest.fixture
def use_service():
    def _install(service) -> None:
        app.dependency_overrides[get_chat_service] = lambda: service

    yield _install
    app.dependency_overrides.clear()


def test_root_status() -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "status": "running",
        "message": "Chronus AI Backend is active",
        "api_docs": "/api/ai/chat",
    }


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Frame-Options" not in response.headers


def test_readiness_reports_provider(use_service, openai_config: ProviderConfig, template_dir: Path) -> None:
    use_service(make_service(openai_config, FakeSession(), template_dir))

    body = client.get("/health/ready").json()

    assert body["status"] == "ready"
    assert body["provider"] == "openai"


def test_chat_unconfigured_returns_fallback(use_service, template_dir: Path) -> None:
    use_service(make_service(None, None, template_dir))

    response = client.post("/api/ai/chat", json={"message": "Finish the report", "mode": "todo"})

    assert response.status_code == 200
    assert response.json() == {
        "reply": "I'm simulating a response because the AI API is not configured or reachable. (Mode: todo)",
        "suggestions": [
            {
                "name": "Sample Task from Finish the report",
                "duration": 30,
                "mode": "todo",
                "priority": "medium",
                "reason": "Generated by fallback logic",
            }
        ],
    }


def test_chat_with_provider(use_service, openai_config: ProviderConfig, template_dir: Path) -> None:
    content = json.dumps(
        {
            "reply": "Block out the morning.",
            "suggestions": [
                {"name": "Draft report", "duration": 90, "mode": "todo", "priority": "high", "reason": "Due Friday"}
            ],
            "extra": "ignored",
        }
    )
    session = FakeSession(FakeResponse(openai_envelope(content)))
    use_service(make_service(openai_config, session, template_dir))

    response = client.post("/api/ai/chat", json={"message": "  Finish   the report ", "mode": "todo"})

    assert response.status_code == 200
    assert response.json() == {
        "reply": "Block out the morning.",
        "suggestions": [
            {"name": "Draft report", "duration": 90, "mode": "todo", "priority": "high", "reason": "Due Friday"}
        ],
    }
    assert session.calls[0]["json"]["messages"][1]["content"] == "Finish the report"


def test_chat_provider_failure_is_still_200(use_service, openai_config: ProviderConfig, template_dir: Path) -> None:
    session = FakeSession(FakeResponse({"error": "down"}, status_code=502))
    use_service(make_service(openai_config, session, template_dir))

    response = client.post("/api/ai/chat", json={"message": "Plan", "mode": "final"})

    assert response.status_code == 200
    assert response.json()["suggestions"][0]["name"] == "Sample Task from Plan"


def test_chat_blank_mode_uses_default(use_service, template_dir: Path) -> None:
    use_service(make_service(None, None, template_dir))

    response = client.post("/api/ai/chat", json={"message": "Plan", "mode": "  "})

    assert response.json()["suggestions"][0]["mode"] == "todo"


def test_chat_whitespace_message_is_rejected(use_service, template_dir: Path) -> None:
    use_service(make_service(None, None, template_dir))

    response = client.post("/api/ai/chat", json={"message": "   ", "mode": "todo"})

    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_chat_missing_message_is_rejected() -> None:
    response = client.post("/api/ai/chat", json={"mode": "todo"})

    assert response.status_code == 422


def test_lifespan_starts_and_stops() -> None:
    with TestClient(app) as lifespan_client:
        assert lifespan_client.get("/health").status_code == 200


def test_chat_long_message_is_truncated_not_rejected(
    use_service, openai_config: ProviderConfig, template_dir: Path
) -> None:
    content = json.dumps({"reply": "ok", "suggestions": []})
    session = FakeSession(FakeResponse(openai_envelope(content)))
    use_service(make_service(openai_config, session, template_dir))

    response = client.post("/api/ai/chat", json={"message": "x" * 5000, "mode": "todo"})

    assert response.status_code == 200
    assert response.json() == {"reply": "ok", "suggestions": []}
    assert session.calls[0]["json"]["messages"][1]["content"] == "x" * 4000


def test_only_cors_middleware_is_registered() -> None:
    assert all(middleware.cls is CORSMiddleware for middleware in app.user_middleware)
