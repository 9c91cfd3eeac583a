from __future__ import annotations

from typing import Any

from content_validation.findings import Findings
from content_validation.limits import DEFAULT_LIMITS, ValidationLimits
from content_validation.sizing import size_of, to_kb
from content_validation.structure import field_of, is_missing


REQUIRED_METADATA_FIELDS = ("title", "description", "duration", "targetAudience", "language")


def collect_manifest_findings(manifest: Any, out: Findings, limits: ValidationLimits = DEFAULT_LIMITS) -> int:
    """
    Checks for the flat game-manifest format used by the editor integration:
    gameId + metadata + scenes[{id, type: dialogue|quiz, ...}].

    Returns the manifest's serialized size in bytes.
    """
    if is_missing(field_of(manifest, "gameId")):
        out.error("Missing required field: gameId")

    metadata = field_of(manifest, "metadata")
    if metadata is None:
        out.error("Missing required field: metadata")
    else:
        for name in REQUIRED_METADATA_FIELDS:
            if is_missing(field_of(metadata, name)):
                out.error(f"Missing required metadata field: {name}")

    scenes = field_of(manifest, "scenes")
    if not isinstance(scenes, list):
        out.error("Missing or invalid scenes array")
    else:
        for index, scene in enumerate(scenes):
            if not isinstance(scene, dict):
                out.error(f"Scene {index} must be an object, got {type(scene).__name__}")
                continue
            if is_missing(scene.get("id")):
                out.error(f"Scene {index} missing id")
            if is_missing(scene.get("type")):
                out.error(f"Scene {index} missing type")

            scene_type = scene.get("type")
            if scene_type == "dialogue" and size_of(scene) > limits.dialogue_scene_max:
                out.error(f"Dialogue scene {scene.get('id')} exceeds size limit")
            if scene_type == "quiz" and size_of(scene) > limits.quiz_scene_max:
                out.error(f"Quiz scene {scene.get('id')} exceeds size limit")

    total = size_of(manifest)
    if total > limits.total_json_max:
        out.error(f"Total manifest size {to_kb(total)}KB exceeds {limits.total_json_max // 1024}KB limit")
    return total
