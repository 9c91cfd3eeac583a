from __future__ import annotations

from typing import Any, Iterable, List, Optional


def field_of(container: Any, key: str) -> Any:
    if isinstance(container, dict):
        return container.get(key)
    return None


def get_scenes(document: Any) -> Optional[List[Any]]:
    """Return content.scenes when it is a list, otherwise None."""
    scenes = field_of(field_of(document, "content"), "scenes")
    if isinstance(scenes, list):
        return scenes
    return None


def check_structure(document: Any) -> List[str]:
    """
    Top-level shape checks. Non-object input (including None) is treated
    as an empty document so every missing piece is reported.
    """
    errors: List[str] = []

    if field_of(document, "metadata") is None:
        errors.append("Missing required field: metadata")

    if field_of(document, "content") is None:
        errors.append("Missing required field: content")

    if get_scenes(document) is None:
        errors.append("Missing or invalid scenes array")

    return errors


def scene_label(scene: Any) -> str:
    """Identifier used in messages; scenes without an id still get a readable name."""
    scene_id = field_of(scene, "sceneId")
    if scene_id is None or scene_id == "":
        return "<missing sceneId>"
    return str(scene_id)


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(container: Any, keys: Iterable[str]) -> List[str]:
    return [k for k in keys if is_missing(field_of(container, k))]


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
