from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


# Byte ceilings. The runtime must load in under 2s on constrained networks.
DIALOGUE_SCENE_MAX = 50 * 1024
QUIZ_SCENE_MAX = 30 * 1024
ASSESSMENT_SCENE_MAX = 75 * 1024  # reserved until the Assessment scene type exists
TOTAL_JSON_MAX = 500 * 1024

MAX_LOADING_TIME = 2000  # ms
MIN_LIGHTHOUSE_SCORE = 95
VALIDATION_TIMEOUT = 5000  # ms

CONTENT_LIMITS: Mapping[str, int] = MappingProxyType(
    {
        "DIALOGUE_SCENE_MAX": DIALOGUE_SCENE_MAX,
        "QUIZ_SCENE_MAX": QUIZ_SCENE_MAX,
        "ASSESSMENT_SCENE_MAX": ASSESSMENT_SCENE_MAX,
        "TOTAL_JSON_MAX": TOTAL_JSON_MAX,
    }
)

PERFORMANCE_BUDGETS: Mapping[str, int] = MappingProxyType(
    {
        "MAX_LOADING_TIME": MAX_LOADING_TIME,
        "MIN_LIGHTHOUSE_SCORE": MIN_LIGHTHOUSE_SCORE,
        "VALIDATION_TIMEOUT": VALIDATION_TIMEOUT,
    }
)


class ValidationLimits(BaseModel):
    """
    Every ceiling, budget and tuning threshold the engine consults.

    One frozen value is injected into the validator so tests (or a YAML
    override) can change limits without touching module globals.

    Tuning knobs:
      - dialogue_text_warn_chars: turns longer than this get a "very long" warning
      - dialogue_duration_target_s: the 7-minute session target
      - quiz_question_warn_count: quizzes with more questions get a length warning
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dialogue_scene_max: int = Field(DIALOGUE_SCENE_MAX, gt=0, description="Bytes")
    quiz_scene_max: int = Field(QUIZ_SCENE_MAX, gt=0, description="Bytes")
    assessment_scene_max: int = Field(ASSESSMENT_SCENE_MAX, gt=0, description="Bytes (reserved)")
    total_json_max: int = Field(TOTAL_JSON_MAX, gt=0, description="Bytes")

    max_loading_time_ms: int = Field(MAX_LOADING_TIME, gt=0)
    min_lighthouse_score: int = Field(MIN_LIGHTHOUSE_SCORE, ge=0, le=100)
    validation_timeout_ms: int = Field(VALIDATION_TIMEOUT, gt=0)

    dialogue_text_warn_chars: int = Field(500, ge=1)
    dialogue_duration_target_s: float = Field(420, gt=0)
    quiz_question_warn_count: int = Field(10, ge=1)

    large_content_ratio: float = Field(0.8, gt=0, le=1, description="Share of total_json_max that counts as large")
    load_time_floor_ms: float = Field(500, ge=0, description="Fixed network + render overhead")
    load_time_ms_per_byte: float = Field(0.002, ge=0)


DEFAULT_LIMITS = ValidationLimits()
