from __future__ import annotations

import json

import pytest

from chronus_ai.core.exceptions import FormatError
from chronus_ai.llm.normalizer import normalize, strip_code_fences
from chronus_ai.models.chat import Suggestion


def _payload(**overrides) -> str:
    body = {
        "reply": "Here is your plan.",
        "suggestions": [
            {
                "name": "Read Chapter 1",
                "duration": 45,
                "mode": "study",
                "priority": "high",
                "reason": "Core material",
            }
        ],
    }
    body.update(overrides)
    return json.dumps(body)


def test_normalize_full_result() -> None:
    result = normalize(_payload())

    assert result.reply == "Here is your plan."
    assert result.suggestions == [
        Suggestion(name="Read Chapter 1", duration=45, mode="study", priority="high", reason="Core material")
    ]


def test_normalize_strips_whitespace_and_fences() -> None:
    result = normalize("\n  ```json\n" + _payload() + "\n```  \n")

    assert result.reply == "Here is your plan."


def test_normalize_ignores_unknown_fields() -> None:
    text = _payload(confidence=0.9)

    assert normalize(text).reply == "Here is your plan."


def test_normalize_missing_suggestions_is_empty() -> None:
    assert normalize('{"reply": "Nothing to schedule."}').suggestions == []


def test_normalize_priority_is_case_insensitive() -> None:
    text = _payload(suggestions=[
        {"name": "Gym", "duration": 60, "mode": "todo", "priority": "High", "reason": "Health"}
    ])

    assert normalize(text).suggestions[0].priority == "high"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "Sure! Here is your plan.",
        "{\"reply\": \"unterminated\"",
        "[]",
        "\"just a string\"",
        '{"suggestions": []}',
        '{"reply": "x", "suggestions": {"name": "not a list"}}',
        '{"reply": "x", "suggestions": null}',
        '{"reply": "x", "suggestions": [{"name": "No duration", "mode": "todo", "priority": "low", "reason": "r"}]}',
        '{"reply": "x", "suggestions": [{"name": "n", "duration": -5, "mode": "todo", "priority": "low", "reason": "r"}]}',
        '{"reply": "x", "suggestions": [{"name": "n", "duration": 5, "mode": "todo", "priority": "urgent", "reason": "r"}]}',
        '{"reply": "x", "suggestions": [{"name": "n", "duration": true, "mode": "todo", "priority": "low", "reason": "r"}]}',
    ],
)
def test_normalize_rejects_bad_output(text: str) -> None:
    with pytest.raises(FormatError):
        normalize(text)


def test_normalize_rejects_non_text() -> None:
    with pytest.raises(FormatError):
        normalize(None)  # type: ignore[arg-type]


def test_strip_code_fences() -> None:
    assert strip_code_fences("```json\n{}\n```") == "{}"
    assert strip_code_fences("```JSON {} ```") == "{}"
    assert strip_code_fences("  {}  ") == "{}"


def test_suggestion_is_immutable() -> None:
    suggestion = Suggestion(name="n", duration=1, mode="todo", priority="low", reason="r")

    with pytest.raises(Exception):
        suggestion.name = "changed"  # type: ignore[misc]


def test_numeric_string_duration_is_coerced() -> None:
    result = normalize(
        '{"reply": "x", "suggestions": [{"name": "n", "duration": "45", "mode": "todo", "priority": "low", "reason": "r"}]}'
    )

    assert result.suggestions[0].duration == 45
