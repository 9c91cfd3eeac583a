from __future__ import annotations

from typing import Any, List, Optional

from content_validation.limits import DEFAULT_LIMITS, ValidationLimits
from content_validation.sizing import size_of, to_kb
from content_validation.structure import scene_label
from schemas.content import SceneKind


SCENE_LABELS = {
    SceneKind.dialogue: "DialogueScene",
    SceneKind.quiz: "QuizScene",
}


def scene_ceiling(kind: SceneKind, limits: ValidationLimits = DEFAULT_LIMITS) -> Optional[int]:
    if kind is SceneKind.dialogue:
        return limits.dialogue_scene_max
    if kind is SceneKind.quiz:
        return limits.quiz_scene_max
    # Assessment scenes are not defined yet; unknown types carry no ceiling.
    return None


def check_scene_budget(
    scene: Any,
    kind: SceneKind,
    *,
    limits: ValidationLimits = DEFAULT_LIMITS,
    size: Optional[int] = None,
) -> List[str]:
    """
    Compare one scene's serialized size with its type's ceiling.
    Pass size when it has already been measured.
    """
    ceiling = scene_ceiling(kind, limits)
    if ceiling is None:
        return []

    measured = size_of(scene) if size is None else size
    if measured <= ceiling:
        return []

    return [f"{SCENE_LABELS[kind]} {scene_label(scene)} size {to_kb(measured)}KB exceeds limit {ceiling // 1024}KB"]


def check_total_budget(
    document: Any,
    *,
    limits: ValidationLimits = DEFAULT_LIMITS,
    size: Optional[int] = None,
) -> List[str]:
    measured = size_of(document) if size is None else size
    if measured <= limits.total_json_max:
        return []
    return [f"Content size {to_kb(measured)}KB exceeds limit {limits.total_json_max // 1024}KB"]
