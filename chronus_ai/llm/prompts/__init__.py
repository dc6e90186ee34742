"""
Prompts module - LLM instruction templates.

Mode templates live as text files under ``resources/`` so they can be
edited without touching code; the built-in prompt is the last resort.
"""
from chronus_ai.llm.prompts.planning_prompts import (
    PLANNING_SYSTEM_PROMPT,
    MODE_PLACEHOLDER,
    TemplateResolver,
    mode_template_name,
    substitute_mode,
)

__all__ = [
    "PLANNING_SYSTEM_PROMPT",
    "MODE_PLACEHOLDER",
    "TemplateResolver",
    "mode_template_name",
    "substitute_mode",
]
