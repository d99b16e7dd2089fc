"""Unit tests for the wizard step/question schema."""

import pytest

from ohshub.core.enums import QuestionType
from ohshub.core.exceptions import InvalidAnswerError, WizardConfigurationError
from ohshub.schemas.wizard import (
    AllOf,
    Question,
    Step,
    all_of,
    answer_in,
    answered,
    any_of,
    build_steps,
    includes,
    not_,
    validate_wizard,
)

YES_NO = [{"value": "yes", "label": "Ja"}, {"value": "no", "label": "Nee"}]


def _question(**overrides) -> Question:
    data = {
        "id": "q",
        "label": "Vraag",
        "type": QuestionType.SINGLE_CHOICE,
        "options": YES_NO,
    }
    data.update(overrides)
    return Question.model_validate(data)


class TestConditions:
    """Tests for declarative visibility conditions."""

    def test_answer_in(self):
        condition = answer_in("q", "yes", "maybe")
        assert condition.evaluate({"q": "yes"})
        assert not condition.evaluate({"q": "no"})
        assert not condition.evaluate({})
        assert not condition.evaluate({"q": ["yes"]})

    def test_includes(self):
        condition = includes("kinds", "lev")
        assert condition.evaluate({"kinds": ["wet", "lev"]})
        assert not condition.evaluate({"kinds": ["wet"]})
        assert not condition.evaluate({"kinds": "lev"})

    def test_answered(self):
        condition = answered("q")
        assert condition.evaluate({"q": "x"})
        assert not condition.evaluate({"q": []})

    def test_combinators(self):
        condition = all_of(includes("ppe", "gloves"), not_(includes("ppe", "none")))
        assert condition.evaluate({"ppe": ["gloves"]})
        assert not condition.evaluate({"ppe": ["gloves", "none"]})
        assert any_of(answer_in("a", "1"), answer_in("b", "2")).evaluate({"b": "2"})

    def test_question_ids_are_collected(self):
        condition = all_of(answer_in("a", "1"), any_of(includes("b", "x"), not_(answered("c"))))
        assert condition.question_ids() == {"a", "b", "c"}

    def test_conditions_round_trip_through_json(self):
        """Conditions serialize with a ``kind`` tag and parse back."""
        condition = all_of(answer_in("a", "1"), not_(includes("b", "x")))
        parsed = AllOf.model_validate_json(condition.model_dump_json())
        assert parsed == condition
        assert condition.model_dump()["conditions"][1]["kind"] == "not"


class TestQuestion:
    """Tests for question invariants and answer checks."""

    def test_duplicate_option_values_rejected(self):
        with pytest.raises(ValueError):
            _question(options=[{"value": "a", "label": "A"}, {"value": "a", "label": "B"}])

    def test_choice_question_needs_options(self):
        with pytest.raises(ValueError):
            _question(options=[])

    def test_free_text_cannot_have_options(self):
        with pytest.raises(ValueError):
            _question(type=QuestionType.FREE_TEXT)

    def test_required_defaults_by_type(self):
        """Choice questions are required by default, free text is not."""
        assert _question().is_required
        assert not _question(type=QuestionType.FREE_TEXT, options=[]).is_required
        assert not _question(required=False).is_required
        assert _question(type=QuestionType.FREE_TEXT, options=[], required=True).is_required

    def test_is_answered_depends_on_type(self):
        multi = _question(type=QuestionType.MULTI_CHOICE)
        assert multi.is_answered({"q": ["yes"]})
        assert not multi.is_answered({"q": []})
        assert not multi.is_answered({"q": "yes"})
        assert _question().is_answered({"q": "yes"})
        assert not _question().is_answered({"q": ""})

    def test_check_answer_rejects_undeclared_value(self):
        with pytest.raises(InvalidAnswerError):
            _question().check_answer("maybe")

    def test_check_answer_rejects_wrong_shapes(self):
        with pytest.raises(InvalidAnswerError):
            _question().check_answer(["yes"])
        with pytest.raises(InvalidAnswerError):
            _question(type=QuestionType.MULTI_CHOICE).check_answer("yes")

    def test_check_answer_accepts_valid_values(self):
        _question().check_answer("yes")
        _question(type=QuestionType.MULTI_CHOICE).check_answer(["yes", "no"])
        _question(type=QuestionType.FREE_TEXT, options=[]).check_answer("vrije tekst")

    def test_label_for_passes_unknown_values_through(self):
        question = _question()
        assert question.label_for("yes") == "Ja"
        assert question.label_for("legacy") == "legacy"


class TestWizardValidation:
    """Tests for cross-step wizard invariants."""

    def test_duplicate_step_ids_rejected(self):
        steps = [
            Step(id="s", title="A", description=""),
            Step(id="s", title="B", description=""),
        ]
        with pytest.raises(WizardConfigurationError):
            validate_wizard(steps)

    def test_question_ids_must_be_unique_across_steps(self):
        """Answers share one flat mapping, so ids collide across steps too."""
        steps = [
            Step(id="s1", title="A", description="", questions=(_question(),)),
            Step(id="s2", title="B", description="", questions=(_question(),)),
        ]
        with pytest.raises(WizardConfigurationError):
            validate_wizard(steps)

    def test_condition_on_unknown_question_rejected(self):
        steps = [
            Step(
                id="s1",
                title="A",
                description="",
                questions=(_question(),),
                visible_when=answer_in("missing", "yes"),
            ),
        ]
        with pytest.raises(WizardConfigurationError):
            validate_wizard(steps)

    def test_build_steps_wraps_malformed_definitions(self):
        with pytest.raises(WizardConfigurationError):
            build_steps([{"id": "s", "title": "A"}])

    def test_build_steps_returns_valid_schema(self, branching_steps):
        assert [s.id for s in branching_steps] == ["intro", "details", "extra", "closing"]
        assert branching_steps[1].visible_when == answer_in("has-hazard", "yes")
