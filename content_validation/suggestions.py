from __future__ import annotations

from typing import Iterable, List, Tuple


# (substring of an error message, hint shown to the content author)
_HINTS: Tuple[Tuple[str, str], ...] = (
    ("Missing required field: metadata", "Add a metadata object identifying the submission (id, version, persona)"),
    ("Missing required field: content", "Wrap your scenes in a content object: {\"content\": {\"scenes\": [...]}}"),
    ("Missing or invalid scenes array", "Include at least one scene in your scenes array"),
    ("Missing required metadata field", "Fill in title, description, duration, targetAudience and language in metadata"),
    ("exceeds limit", "Split large scenes into smaller ones or shorten long texts"),
    ("exceeds size limit", "Split large scenes into smaller ones or shorten long texts"),
    ("missing sceneId", "Give every scene a unique sceneId"),
    ("missing characters array", "List the speaking characters in a characters array"),
    ("missing dialogueTurns array", "Add the dialogue as a dialogueTurns array"),
    ("missing questions array", "Quiz scenes need a questions array"),
    ("missing options array", "Quiz options should be an array of answer choices"),
    ("has no correct options", "Mark at least one option with \"isCorrect\": true"),
    ("true_false must have exactly 2 options", "True/false questions need exactly two options"),
    ("invalid questionType", "Use multiple_choice, true_false or multiple_select as questionType"),
    ("missing required fields", "Ensure all required text fields have content"),
    ("must be an object", "Each entry must be a JSON object"),
)


def generate_suggestions(errors: Iterable[str]) -> List[str]:
    """
    Map report errors to author-facing hints. Duplicates are removed and the
    order follows the first error that triggered each hint.
    """
    out: List[str] = []
    for error in errors:
        for needle, hint in _HINTS:
            if needle in error and hint not in out:
                out.append(hint)
    return out
