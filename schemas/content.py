from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from schemas.base import ContentModelBase


class SceneKind(str, Enum):
    dialogue = "Dialogue"
    quiz = "Quiz"
    unknown = "Unknown"


# Authoring tools emit both the short and the "...Scene" spelling.
SCENE_TYPE_ALIASES: Dict[str, SceneKind] = {
    "Dialogue": SceneKind.dialogue,
    "DialogueScene": SceneKind.dialogue,
    "Quiz": SceneKind.quiz,
    "QuizScene": SceneKind.quiz,
}

QuestionType = Literal["multiple_choice", "true_false", "multiple_select"]
QUESTION_TYPES: tuple[str, ...] = ("multiple_choice", "true_false", "multiple_select")


def resolve_scene_kind(scene_type: Any) -> SceneKind:
    if isinstance(scene_type, str):
        return SCENE_TYPE_ALIASES.get(scene_type, SceneKind.unknown)
    return SceneKind.unknown


class Character(ContentModelBase):
    character_id: Optional[str] = Field(None, alias="characterId")
    name: Optional[str] = None
    role: Optional[str] = None


class DialogueTurn(ContentModelBase):
    speaker: str
    character_id: str = Field(..., alias="characterId")
    text: str
    emotion: Optional[str] = None
    timing: Optional[Any] = None


class DialogueScene(ContentModelBase):
    scene_kind: Literal[SceneKind.dialogue] = SceneKind.dialogue
    scene_id: str = Field(..., alias="sceneId")
    title: Optional[str] = None
    description: Optional[str] = None
    characters: List[Character] = Field(default_factory=list)
    dialogue_turns: List[DialogueTurn] = Field(default_factory=list, alias="dialogueTurns")
    scene_duration: Optional[float] = Field(None, alias="sceneDuration", description="Seconds")


class QuizOption(ContentModelBase):
    option_id: str = Field(..., alias="optionId")
    text: str
    is_correct: bool = Field(..., alias="isCorrect", strict=True)


class QuizQuestion(ContentModelBase):
    question_id: str = Field(..., alias="questionId")
    question_type: QuestionType = Field(..., alias="questionType")
    question_text: str = Field(..., alias="questionText")
    options: List[QuizOption] = Field(default_factory=list)


class QuizScene(ContentModelBase):
    scene_kind: Literal[SceneKind.quiz] = SceneKind.quiz
    scene_id: str = Field(..., alias="sceneId")
    title: Optional[str] = None
    description: Optional[str] = None
    questions: List[QuizQuestion] = Field(default_factory=list)
    passing_score: Optional[float] = Field(None, alias="passingScore")
    scene_duration: Optional[float] = Field(None, alias="sceneDuration", description="Seconds")


class UnknownScene(ContentModelBase):
    """
    A scene whose type this engine does not recognize yet.
    The raw payload is kept untouched so newer runtimes can still use it.
    """

    scene_kind: Literal[SceneKind.unknown] = SceneKind.unknown
    scene_type: Optional[Any] = Field(None, alias="sceneType")
    raw: Dict[str, Any] = Field(default_factory=dict)


Scene = Union[DialogueScene, QuizScene, UnknownScene]


def parse_scene(raw: Dict[str, Any]) -> Scene:
    kind = resolve_scene_kind(raw.get("sceneType"))
    if kind is SceneKind.dialogue:
        return DialogueScene.model_validate(raw)
    if kind is SceneKind.quiz:
        return QuizScene.model_validate(raw)
    return UnknownScene(sceneType=raw.get("sceneType"), raw=dict(raw))


class ContentDocument(ContentModelBase):
    metadata: Any
    scenes: List[Scene] = Field(default_factory=list)

