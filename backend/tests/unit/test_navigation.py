"""Unit tests for the wizard navigation state machine."""

import logging

import pytest

from ohshub.core.exceptions import InvalidAnswerError, StepNotVisibleError, UnknownStepError
from ohshub.core.navigation import WizardNavigator


class TestInitialState:
    """Tests for the starting position."""

    def test_starts_at_first_visible_step(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        assert nav.current_step_id == "intro"
        assert not nav.at_review
        assert nav.progress == 0

    def test_hidden_steps_are_not_navigable(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        assert nav.visible_step_ids() == ["intro", "closing"]


class TestTransitions:
    """Tests for next/previous/go_to."""

    def test_next_skips_hidden_steps(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        assert nav.next()
        assert nav.current_step_id == "closing"

    def test_next_after_last_visible_step_reaches_review(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        nav.next()
        assert nav.next()
        assert nav.at_review
        assert nav.current_step is None
        assert nav.progress == 100
        assert not nav.next()

    def test_previous_from_review_returns_to_last_visible_step(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("closing")
        nav.next()
        assert nav.previous()
        assert nav.current_step_id == "closing"

    def test_previous_at_first_step_does_not_move(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        assert not nav.previous()
        assert nav.current_step_id == "intro"

    def test_next_then_previous_returns_to_prior_step(self, branching_steps):
        """From every non-initial visible step, next() then previous() is a no-op."""
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes", "kinds": ["noise"]})
        for step_id in nav.visible_step_ids()[1:]:
            nav.go_to(step_id)
            before = nav.export_state()
            nav.next()
            nav.previous()
            assert nav.export_state() == before

    def test_go_to_is_idempotent(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("details")
        once = nav.export_state()
        nav.go_to("details")
        assert nav.export_state() == once

    def test_go_to_unknown_step(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        with pytest.raises(UnknownStepError):
            nav.go_to("nope")

    def test_go_to_hidden_step(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        with pytest.raises(StepNotVisibleError):
            nav.go_to("details")
        assert nav.current_step_id == "intro"

    def test_progress_uses_position_among_visible_steps(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("details")
        assert nav.progress == round(1 / 3 * 100)


class TestVisibilityReevaluation:
    """Tests for visibility changes caused by answers."""

    def test_answer_shows_step_on_next_query(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        nav.answer("has-hazard", "yes")
        assert nav.visible_step_ids() == ["intro", "details", "closing"]
        nav.next()
        assert nav.current_step_id == "details"

    def test_answer_hides_step_on_next_query(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.answer("has-hazard", "no")
        assert "details" not in nav.visible_step_ids()

    def test_hidden_current_step_clamps_to_preceding_visible_step(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes", "kinds": ["noise"]})
        nav.go_to("extra")
        nav.toggle("kinds", "noise", False)
        assert nav.current_step_id == "details"

    def test_clamp_is_logged_at_debug(self, branching_steps, caplog):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("details")
        with caplog.at_level(logging.DEBUG, logger="ohshub.core.navigation"):
            nav.answer("has-hazard", "no")
        assert nav.current_step_id == "intro"
        assert any("wizard_step_clamped" in r.getMessage() for r in caplog.records)

    def test_conditional_question_visibility(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("details")
        assert [q.id for q in nav.visible_questions()] == ["kinds"]
        nav.toggle("kinds", "other", True)
        assert [q.id for q in nav.visible_questions()] == ["kinds", "kinds-other"]

    def test_hidden_answers_are_retained(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.toggle("kinds", "dust", True)
        nav.answer("has-hazard", "no")
        assert nav.answers["kinds"] == ("dust",)


class TestCompleteness:
    """Tests for required questions and step validation."""

    def test_missing_required_lists_unanswered_choice_questions(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        assert nav.missing_required() == ["has-hazard"]
        nav.answer("has-hazard", "no")
        assert nav.missing_required() == []
        assert nav.is_step_complete()

    def test_hidden_required_questions_are_not_missing(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("details")
        nav.toggle("kinds", "dust", True)
        assert nav.missing_required() == []
        nav.toggle("kinds", "other", True)
        assert nav.missing_required() == ["kinds-other"]

    def test_next_with_require_complete_blocks_on_missing_answers(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        assert not nav.next(require_complete=True)
        assert nav.current_step_id == "intro"
        nav.answer("has-hazard", "no")
        assert nav.next(require_complete=True)

    def test_missing_required_at_review_covers_all_visible_steps(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("closing")
        nav.next()
        assert nav.at_review
        assert nav.missing_required() == ["kinds"]


class TestAnswerEntry:
    """Tests for strict answer entry."""

    def test_unknown_question_rejected(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        with pytest.raises(InvalidAnswerError):
            nav.answer("nope", "x")

    def test_undeclared_option_rejected(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        with pytest.raises(InvalidAnswerError):
            nav.answer("has-hazard", "maybe")
        assert "has-hazard" not in nav.answers

    def test_toggle_on_single_choice_rejected(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        with pytest.raises(InvalidAnswerError):
            nav.toggle("has-hazard", "yes", True)

    def test_toggle_on_undeclared_option_rejected(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        with pytest.raises(InvalidAnswerError):
            nav.toggle("kinds", "legacy", True)

    def test_stale_option_can_be_unchecked(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        nav.load_state({"answers": {"has-hazard": "yes", "kinds": ["dust", "legacy"]}})

        nav.toggle("kinds", "legacy", False)

        assert nav.answers["kinds"] == ("dust",)

    def test_clear_removes_answer(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.clear("has-hazard")
        assert "has-hazard" not in nav.answers


class TestResetAndState:
    """Tests for reset and state transfer."""

    def test_reset_clears_answers_and_restarts(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes"})
        nav.go_to("details")
        nav.reset()
        assert nav.answers == {}
        assert nav.current_step_id == "intro"

    def test_export_and_load_state(self, branching_steps):
        nav = WizardNavigator(branching_steps, {"has-hazard": "yes", "kinds": ["dust"]})
        nav.go_to("details")
        state = nav.export_state()
        assert state == {
            "current_step": "details",
            "at_review": False,
            "answers": {"has-hazard": "yes", "kinds": ["dust"]},
        }

        restored = WizardNavigator(branching_steps)
        restored.load_state(state)
        assert restored.export_state() == state

    def test_load_state_with_unknown_step_restarts(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        nav.load_state({"current_step": "removed-step", "answers": {"has-hazard": "yes"}})
        assert nav.current_step_id == "intro"
        assert nav.answers["has-hazard"] == "yes"

    def test_load_state_clamps_hidden_step(self, branching_steps):
        nav = WizardNavigator(branching_steps)
        nav.load_state({"current_step": "details", "answers": {"has-hazard": "no"}})
        assert nav.current_step_id == "intro"
