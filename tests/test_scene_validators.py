from __future__ import annotations

import unittest

from content_validation.dialogue import validate_dialogue_scene
from content_validation.limits import ValidationLimits
from content_validation.quiz import validate_quiz_scene
from content_validation.scenes import check_scene
from schemas.content import SceneKind


def _dialogue(**overrides) -> dict:
    scene = {
        "sceneId": "d1",
        "sceneType": "Dialogue",
        "title": "Welcome",
        "characters": [{"characterId": "anna", "name": "Anna", "role": "guide"}],
        "dialogueTurns": [
            {"speaker": "Anna", "characterId": "anna", "text": "Hej och välkommen!", "emotion": "happy"},
        ],
    }
    scene.update(overrides)
    return scene


def _question(question_type: str = "multiple_choice", options=None, **overrides) -> dict:
    if options is None:
        options = [
            {"optionId": "a", "text": "Yes", "isCorrect": True},
            {"optionId": "b", "text": "No", "isCorrect": False},
        ]
    q = {
        "questionId": "q-1",
        "questionType": question_type,
        "questionText": "Is this safe?",
        "options": options,
    }
    q.update(overrides)
    return q


def _quiz(questions=None, **overrides) -> dict:
    scene = {
        "sceneId": "quiz1",
        "sceneType": "Quiz",
        "questions": [_question()] if questions is None else questions,
        "passingScore": 70,
    }
    scene.update(overrides)
    return scene


class TestDialogueValidator(unittest.TestCase):
    def test_valid_scene(self) -> None:
        out = validate_dialogue_scene(_dialogue())
        self.assertEqual(out.errors, [])
        self.assertEqual(out.warnings, [])

    def test_required_fields(self) -> None:
        out = validate_dialogue_scene({"sceneType": "Dialogue"})
        self.assertIn("DialogueScene missing sceneId", out.errors)
        self.assertIn("DialogueScene <missing sceneId> missing characters array", out.errors)
        self.assertIn("DialogueScene <missing sceneId> missing dialogueTurns array", out.errors)

    def test_characters_must_be_array(self) -> None:
        out = validate_dialogue_scene(_dialogue(characters="anna"))
        self.assertEqual(out.errors, ["DialogueScene d1 missing characters array"])

    def test_empty_characters(self) -> None:
        out = validate_dialogue_scene(_dialogue(characters=[]))
        self.assertEqual(out.errors, ["DialogueScene d1 characters array is empty"])

    def test_turn_missing_fields_reports_index(self) -> None:
        turns = [
            {"speaker": "Anna", "characterId": "anna", "text": "ok"},
            {"speaker": "Anna", "characterId": "", "text": "   "},
            "not a turn",
        ]
        out = validate_dialogue_scene(_dialogue(dialogueTurns=turns))
        self.assertEqual(
            out.errors,
            [
                "DialogueScene d1 turn 1 missing required fields: characterId, text",
                "DialogueScene d1 turn 2 missing required fields: speaker, characterId, text",
            ],
        )

    def test_long_text_warning(self) -> None:
        turns = [
            {"speaker": "Anna", "characterId": "anna", "text": "x" * 500},
            {"speaker": "Anna", "characterId": "anna", "text": "x" * 501},
        ]
        out = validate_dialogue_scene(_dialogue(dialogueTurns=turns))
        self.assertEqual(out.errors, [])
        self.assertEqual(out.warnings, ["DialogueScene d1 turn 1 text is very long (501 chars)"])

    def test_duration_warning_names_scene_and_target(self) -> None:
        self.assertEqual(validate_dialogue_scene(_dialogue(sceneDuration=420)).warnings, [])

        out = validate_dialogue_scene(_dialogue(sceneDuration=421))
        self.assertEqual(len(out.warnings), 1)
        self.assertIn("d1", out.warnings[0])
        self.assertIn("421s", out.warnings[0])
        self.assertIn("420s", out.warnings[0])

    def test_non_numeric_duration_is_ignored(self) -> None:
        self.assertEqual(validate_dialogue_scene(_dialogue(sceneDuration="long")).warnings, [])

    def test_thresholds_come_from_limits(self) -> None:
        limits = ValidationLimits(dialogue_text_warn_chars=5, dialogue_duration_target_s=60)
        out = validate_dialogue_scene(_dialogue(sceneDuration=90), limits)
        self.assertEqual(len(out.warnings), 2)


class TestQuizValidator(unittest.TestCase):
    def test_valid_scene(self) -> None:
        out = validate_quiz_scene(_quiz())
        self.assertEqual(out.errors, [])
        self.assertEqual(out.warnings, [])

    def test_required_fields(self) -> None:
        out = validate_quiz_scene({"sceneType": "Quiz"})
        self.assertEqual(
            out.errors,
            ["QuizScene missing sceneId", "QuizScene <missing sceneId> missing questions array"],
        )

    def test_question_missing_fields(self) -> None:
        q = _question()
        del q["questionText"]
        out = validate_quiz_scene(_quiz([q]))
        self.assertEqual(out.errors, ["QuizScene quiz1 question 0 missing required fields: questionText"])

    def test_invalid_question_type(self) -> None:
        out = validate_quiz_scene(_quiz([_question("essay")]))
        self.assertEqual(out.errors, ["QuizScene quiz1 question 0 invalid questionType: essay"])

    def test_missing_options(self) -> None:
        q = _question()
        del q["options"]
        out = validate_quiz_scene(_quiz([q]))
        self.assertEqual(out.errors, ["QuizScene quiz1 question 0 missing options array"])

    def test_no_correct_option_for_every_question_type(self) -> None:
        for qtype in ("multiple_choice", "true_false", "multiple_select"):
            options = [
                {"optionId": "a", "text": "A", "isCorrect": False},
                {"optionId": "b", "text": "B", "isCorrect": False},
            ]
            out = validate_quiz_scene(_quiz([_question(qtype, options)]))
            self.assertIn("QuizScene quiz1 question 0 has no correct options", out.errors, qtype)

    def test_true_false_arity(self) -> None:
        def options(n: int) -> list:
            return [{"optionId": str(i), "text": f"o{i}", "isCorrect": i == 0} for i in range(n)]

        for n in (1, 3):
            out = validate_quiz_scene(_quiz([_question("true_false", options(n))]))
            self.assertEqual(
                out.errors,
                [f"QuizScene quiz1 question 0 true_false must have exactly 2 options (has {n})"],
            )

        out = validate_quiz_scene(_quiz([_question("true_false", options(2))]))
        self.assertEqual(out.errors, [])

    def test_option_fields(self) -> None:
        options = [
            {"optionId": "a", "text": "A", "isCorrect": True},
            {"optionId": "b", "isCorrect": "false"},
        ]
        out = validate_quiz_scene(_quiz([_question(options=options)]))
        self.assertEqual(
            out.errors,
            ["QuizScene quiz1 question 0 option 1 missing required fields: text, isCorrect"],
        )

    def test_truthy_non_boolean_is_not_correct(self) -> None:
        options = [{"optionId": "a", "text": "A", "isCorrect": "true"}]
        out = validate_quiz_scene(_quiz([_question(options=options)]))
        self.assertIn("QuizScene quiz1 question 0 has no correct options", out.errors)

    def test_question_count_warning(self) -> None:
        self.assertEqual(validate_quiz_scene(_quiz([_question()] * 10)).warnings, [])

        out = validate_quiz_scene(_quiz([_question()] * 11))
        self.assertEqual(out.errors, [])
        self.assertEqual(
            out.warnings,
            ["QuizScene quiz1 has 11 questions, may be too long for the target session length"],
        )


class TestSceneDispatch(unittest.TestCase):
    def test_unknown_type_is_a_warning(self) -> None:
        out = check_scene({"sceneId": "f1", "sceneType": "FutureScene"}, index=0)
        self.assertEqual(out.errors, [])
        self.assertEqual(out.warnings, ["Unknown scene type: FutureScene"])

    def test_long_form_tags_are_recognized(self) -> None:
        out = check_scene(_quiz(sceneType="QuizScene", questions="none"), index=0)
        self.assertEqual(out.errors, ["QuizScene quiz1 missing questions array"])

    def test_non_object_scene(self) -> None:
        out = check_scene(["d1"], index=3)
        self.assertEqual(out.errors, ["Scene 3 must be an object, got list"])

    def test_kind_override(self) -> None:
        scene = _dialogue()
        del scene["sceneType"]
        self.assertEqual(check_scene(scene, index=0, kind=SceneKind.dialogue).errors, [])


if __name__ == "__main__":
    unittest.main()
