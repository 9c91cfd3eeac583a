from __future__ import annotations

from typing import Any

from content_validation.findings import Findings
from content_validation.limits import DEFAULT_LIMITS, ValidationLimits
from content_validation.structure import field_of, is_missing, is_number, missing_fields, scene_label


TURN_REQUIRED_FIELDS = ("speaker", "characterId", "text")


def validate_dialogue_scene(scene: Any, limits: ValidationLimits = DEFAULT_LIMITS) -> Findings:
    """
    Structural and semantic checks for a Dialogue scene.

    Errors:
      - sceneId missing
      - characters / dialogueTurns missing or not arrays
      - a turn without speaker, characterId or text
    Warnings:
      - a turn whose text is longer than dialogue_text_warn_chars
      - sceneDuration above the session target
    """
    out = Findings()
    label = scene_label(scene)

    if is_missing(field_of(scene, "sceneId")):
        out.error("DialogueScene missing sceneId")

    characters = field_of(scene, "characters")
    if not isinstance(characters, list):
        out.error(f"DialogueScene {label} missing characters array")
    elif not characters:
        out.error(f"DialogueScene {label} characters array is empty")

    turns = field_of(scene, "dialogueTurns")
    if not isinstance(turns, list):
        out.error(f"DialogueScene {label} missing dialogueTurns array")
        turns = []

    for index, turn in enumerate(turns):
        missing = missing_fields(turn, TURN_REQUIRED_FIELDS)
        if missing:
            out.error(f"DialogueScene {label} turn {index} missing required fields: {', '.join(missing)}")

        text = field_of(turn, "text")
        if isinstance(text, str) and len(text) > limits.dialogue_text_warn_chars:
            out.warn(f"DialogueScene {label} turn {index} text is very long ({len(text)} chars)")

    duration = field_of(scene, "sceneDuration")
    target = limits.dialogue_duration_target_s
    if is_number(duration) and duration > target:
        out.warn(
            f"DialogueScene {label} duration {duration}s exceeds the {target:g}s (7-minute) session target"
        )

    return out
