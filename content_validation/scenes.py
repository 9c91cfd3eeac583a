from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from content_validation.budget import check_scene_budget
from content_validation.dialogue import validate_dialogue_scene
from content_validation.findings import Findings
from content_validation.limits import DEFAULT_LIMITS, ValidationLimits
from content_validation.quiz import validate_quiz_scene
from content_validation.sizing import size_of
from content_validation.structure import field_of
from schemas.content import SceneKind, resolve_scene_kind


SceneValidator = Callable[[Any, ValidationLimits], Findings]

SCENE_VALIDATORS: Dict[SceneKind, SceneValidator] = {
    SceneKind.dialogue: validate_dialogue_scene,
    SceneKind.quiz: validate_quiz_scene,
}


def check_scene(
    scene: Any,
    *,
    index: int,
    limits: ValidationLimits = DEFAULT_LIMITS,
    kind: Optional[SceneKind] = None,
) -> Findings:
    """
    Budget plus type-specific validation for one scene.

    kind overrides the scene's own sceneType tag (used when a caller already
    knows what it submitted). Unknown types only produce a warning so newer
    content keeps publishing on an older validator.
    """
    out = Findings()

    if not isinstance(scene, dict):
        out.error(f"Scene {index} must be an object, got {type(scene).__name__}")
        return out

    scene_type = field_of(scene, "sceneType")
    if kind is None:
        kind = resolve_scene_kind(scene_type)

    validator = SCENE_VALIDATORS.get(kind)
    if validator is None:
        out.warn(f"Unknown scene type: {scene_type}")
        return out

    for message in check_scene_budget(scene, kind, limits=limits, size=size_of(scene)):
        out.error(message)
    out.extend(validator(scene, limits))
    return out
