"""
Planning Prompts - Instruction templates for the planning assistant.

Templates are plain text files named ``system-prompt-<mode>.txt`` (one per
mode) and ``system-prompt.txt`` (generic), read from a template directory
at call time so they can be edited without a restart. When neither file
exists the built-in PLANNING_SYSTEM_PROMPT is used.

A template may contain the ``{mode}`` placeholder; it is replaced
textually (not with str.format, since templates hold literal JSON braces).
"""
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from chronus_ai.core.logging_config import get_logger

logger = get_logger(__name__)

MODE_PLACEHOLDER = "{mode}"
GENERIC_TEMPLATE_NAME = "system-prompt.txt"

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "resources"

PLANNING_SYSTEM_PROMPT = """You are a planning assistant Chronus.
Analyze the user's request and current mode ("{mode}").
Return a JSON object with:
1. "reply": A friendly response.
2. "suggestions": An array of tasks derived from the request.
   Each task has: "name", "duration" (minutes), "mode" (todo/study/final), "priority" (high/medium/low), "reason".

Example JSON:
{
  "reply": "I've added a study session for you.",
  "suggestions": [
    { "name": "Read Chapter 1", "duration": 45, "mode": "study", "priority": "high", "reason": "Core material" }
  ]
}
IMPORTANT: Output ONLY valid JSON. No markdown blocks.
"""

# A lookup strategy returns template text for a mode, or None to defer
# to the next strategy.
TemplateLookup = Callable[[str], Optional[str]]


def mode_template_name(mode: str) -> str:
    """File name of the mode-specific template (mode is lower-cased)."""
    return f"system-prompt-{mode.strip().lower()}.txt"


def _is_safe_mode(mode: str) -> bool:
    normalized = mode.strip()
    if not normalized or normalized in (".", ".."):
        return False
    return "/" not in normalized and "\\" not in normalized and "\x00" not in normalized


def _read_template(path: Path) -> Optional[str]:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read template {path}: {e}")
        return None


def substitute_mode(template: str, mode: str) -> str:
    """Insert the literal mode into the template, if it has a placeholder."""
    if MODE_PLACEHOLDER in template:
        return template.replace(MODE_PLACEHOLDER, mode)
    return template


class TemplateResolver:
    """
    Resolve the instruction text for a mode.

    Lookups run in order until one returns text:
    mode-specific file, generic file, built-in prompt.

    Example:
        >>> resolver = TemplateResolver()
        >>> text = resolver.resolve("Study")   # reads system-prompt-study.txt
    """

    def __init__(
        self,
        template_dir: Optional[Union[str, Path]] = None,
        lookups: Optional[Sequence[TemplateLookup]] = None,
    ):
        """
        Args:
            template_dir: Directory holding the template files.
                Defaults to the packaged resources directory.
            lookups: Custom lookup chain. The built-in prompt is always
                appended as the last resort.
        """
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        if lookups is None:
            lookups = [self._mode_file, self._generic_file]
        self.lookups: List[TemplateLookup] = list(lookups) + [self._builtin]

    def resolve(self, mode: str) -> str:
        """Return the instruction text for ``mode``. Never raises."""
        mode = mode or ""
        for lookup in self.lookups:
            try:
                template = lookup(mode)
            except Exception as e:
                logger.warning(f"Template lookup {getattr(lookup, '__name__', lookup)} failed: {e}")
                continue
            if template is not None:
                return substitute_mode(template, mode)
        # Unreachable: the built-in lookup always answers
        return substitute_mode(PLANNING_SYSTEM_PROMPT, mode)

    def _mode_file(self, mode: str) -> Optional[str]:
        if not _is_safe_mode(mode):
            return None
        template = _read_template(self.template_dir / mode_template_name(mode))
        if template is not None:
            logger.debug(f"Using mode template for '{mode}'")
        return template

    def _generic_file(self, mode: str) -> Optional[str]:
        template = _read_template(self.template_dir / GENERIC_TEMPLATE_NAME)
        if template is not None:
            logger.debug(f"No template for mode '{mode}', using generic template")
        return template

    def _builtin(self, mode: str) -> str:
        logger.debug(f"No template files in {self.template_dir}, using built-in prompt")
        return PLANNING_SYSTEM_PROMPT
