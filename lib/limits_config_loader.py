from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml

from content_validation.limits import ValidationLimits


DEFAULT_LIMITS_CONFIG_PATH = Path("config/validation_limits.yaml")


def load_validation_limits(path: Optional[Path] = None) -> ValidationLimits:
    """
    Loads and validates validation limits from YAML.
    Keys not present in the file keep their built-in defaults.
    """
    p = path or DEFAULT_LIMITS_CONFIG_PATH
    if not p.exists():
        raise FileNotFoundError(f"Validation limits file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Validation limits must be a YAML mapping/object: {p}")

    limits = ValidationLimits.model_validate(raw.get("limits", raw))

    # Basic sanity checks
    for name in ("dialogue_scene_max", "quiz_scene_max", "assessment_scene_max"):
        if getattr(limits, name) > limits.total_json_max:
            raise ValueError(
                f"{name} ({getattr(limits, name)}) must not exceed total_json_max ({limits.total_json_max})"
            )

    return limits
