from __future__ import annotations

from typing import Any

from content_validation.findings import Findings
from content_validation.limits import DEFAULT_LIMITS, ValidationLimits
from content_validation.structure import field_of, is_missing, missing_fields, scene_label
from schemas.content import QUESTION_TYPES


QUESTION_REQUIRED_FIELDS = ("questionId", "questionType", "questionText")
OPTION_REQUIRED_FIELDS = ("optionId", "text")


def _validate_options(out: Findings, prefix: str, question: Any) -> None:
    options = field_of(question, "options")
    if not isinstance(options, list):
        out.error(f"{prefix} missing options array")
        return

    if not any(field_of(opt, "isCorrect") is True for opt in options):
        out.error(f"{prefix} has no correct options")

    if field_of(question, "questionType") == "true_false" and len(options) != 2:
        out.error(f"{prefix} true_false must have exactly 2 options (has {len(options)})")

    for opt_index, option in enumerate(options):
        missing = missing_fields(option, OPTION_REQUIRED_FIELDS)
        if not isinstance(field_of(option, "isCorrect"), bool):
            missing.append("isCorrect")
        if missing:
            out.error(f"{prefix} option {opt_index} missing required fields: {', '.join(missing)}")


def validate_quiz_scene(scene: Any, limits: ValidationLimits = DEFAULT_LIMITS) -> Findings:
    out = Findings()
    label = scene_label(scene)

    if is_missing(field_of(scene, "sceneId")):
        out.error("QuizScene missing sceneId")

    questions = field_of(scene, "questions")
    if not isinstance(questions, list):
        out.error(f"QuizScene {label} missing questions array")
        return out

    for index, question in enumerate(questions):
        prefix = f"QuizScene {label} question {index}"

        missing = missing_fields(question, QUESTION_REQUIRED_FIELDS)
        if missing:
            out.error(f"{prefix} missing required fields: {', '.join(missing)}")

        # A missing questionType is already reported above.
        question_type = field_of(question, "questionType")
        if not is_missing(question_type) and question_type not in QUESTION_TYPES:
            out.error(f"{prefix} invalid questionType: {question_type}")

        _validate_options(out, prefix, question)

    if len(questions) > limits.quiz_question_warn_count:
        out.warn(
            f"QuizScene {label} has {len(questions)} questions, "
            "may be too long for the target session length"
        )

    return out
