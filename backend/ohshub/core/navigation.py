"""Wizard navigation state machine.

The navigator is positioned either on a step or on the synthetic review state
that follows the last visible step. Step and question visibility depend on the
answers, so the visible sequence is recomputed on every query and after every
answer mutation; a current step that becomes hidden is moved to the nearest
preceding visible step.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ohshub.core.answers import AnswerSet, AnswerStore, AnswerValue
from ohshub.core.enums import QuestionType
from ohshub.core.exceptions import (
    InvalidAnswerError,
    StepNotVisibleError,
    UnknownStepError,
)
from ohshub.core.structured_logging import log_json
from ohshub.schemas.wizard import Question, Step

logger = logging.getLogger(__name__)


class WizardNavigator:
    """Sequences the visible steps of one wizard session.

    Args:
        steps: Validated wizard schema
        answers: Initial answers, copied into the session's own store
    """

    def __init__(self, steps: Sequence[Step], answers: AnswerSet | None = None):
        self._steps = tuple(steps)
        self._step_index = {step.id: i for i, step in enumerate(self._steps)}
        self._questions: dict[str, Question] = {
            q.id: q for step in self._steps for q in step.questions
        }
        self._answers = AnswerStore(answers)
        self._current: str | None = None
        self._at_review = False
        self.start()

    # ─── Queries ──────────────────────────────────────────────────────────

    @property
    def answers(self) -> AnswerSet:
        """Read-only snapshot of the collected answers."""
        return self._answers.snapshot()

    @property
    def at_review(self) -> bool:
        self._clamp()
        return self._at_review

    @property
    def current_step(self) -> Step | None:
        """Current step, None at review."""
        self._clamp()
        if self._at_review or self._current is None:
            return None
        return self._steps[self._step_index[self._current]]

    @property
    def current_step_id(self) -> str | None:
        step = self.current_step
        return step.id if step else None

    def visible_steps(self) -> list[Step]:
        answers = self._answers.snapshot()
        return [step for step in self._steps if step.is_visible(answers)]

    def visible_step_ids(self) -> list[str]:
        return [step.id for step in self.visible_steps()]

    def visible_questions(self, step_id: str | None = None) -> list[Question]:
        """Visible questions of a step (default: the current step)."""
        step = self._resolve_step(step_id)
        if step is None:
            return []
        return step.visible_questions(self._answers.snapshot())

    def missing_required(self, step_id: str | None = None) -> list[str]:
        """Ids of required visible questions without an answer.

        Without ``step_id`` this covers the current step, or every visible
        step when the navigator is at review.
        """
        answers = self._answers.snapshot()
        if step_id is None and self.at_review:
            steps = self.visible_steps()
        else:
            step = self._resolve_step(step_id)
            steps = [step] if step is not None else []

        return [
            q.id
            for step in steps
            for q in step.visible_questions(answers)
            if q.is_required and not q.is_answered(answers)
        ]

    def is_step_complete(self, step_id: str | None = None) -> bool:
        return not self.missing_required(step_id)

    @property
    def progress(self) -> int:
        """Completion percentage (0-100) based on the position among visible steps."""
        if self.at_review:
            return 100
        visible = self.visible_step_ids()
        if not visible or self._current not in visible:
            return 0
        return round(visible.index(self._current) / len(visible) * 100)

    # ─── Transitions ──────────────────────────────────────────────────────

    def start(self) -> None:
        """Move to the first visible step (review when none is visible)."""
        visible = self.visible_step_ids()
        if visible:
            self._current = visible[0]
            self._at_review = False
        else:
            self._current = None
            self._at_review = True

    def next(self, require_complete: bool = False) -> bool:
        """Advance to the next visible step, or to review after the last one.

        Returns:
            True if the position changed
        """
        self._clamp()
        if self._at_review:
            return False
        if require_complete and not self.is_step_complete():
            return False

        position = self._step_index[self._current]
        answers = self._answers.snapshot()
        for step in self._steps[position + 1:]:
            if step.is_visible(answers):
                self._current = step.id
                return True

        self._at_review = True
        return True

    def previous(self) -> bool:
        """Retreat to the previous visible step.

        From review this is the last visible step.

        Returns:
            True if the position changed
        """
        self._clamp()
        answers = self._answers.snapshot()
        if self._at_review:
            visible = self.visible_step_ids()
            if not visible:
                return False
            self._current = visible[-1]
            self._at_review = False
            return True

        position = self._step_index[self._current]
        for step in reversed(self._steps[:position]):
            if step.is_visible(answers):
                self._current = step.id
                return True
        return False

    def go_to(self, step_id: str) -> None:
        """Jump directly to a visible step.

        Raises:
            UnknownStepError: If the wizard has no such step
            StepNotVisibleError: If the step is hidden by the current answers
        """
        if step_id not in self._step_index:
            raise UnknownStepError(step_id)
        step = self._steps[self._step_index[step_id]]
        if not step.is_visible(self._answers.snapshot()):
            raise StepNotVisibleError(step_id)
        self._current = step_id
        self._at_review = False

    def reset(self) -> None:
        """Discard all answers and return to the first visible step."""
        self._answers.clear()
        self.start()

    # ─── Answer entry ─────────────────────────────────────────────────────

    def answer(self, question_id: str, value: AnswerValue) -> None:
        """Store an answer after checking it against its question.

        Raises:
            InvalidAnswerError: If the question is unknown or the value does
                not fit it
        """
        question = self._get_question(question_id)
        question.check_answer(value)
        self._answers.set_answer(question_id, value)
        self._clamp()

    def toggle(self, question_id: str, value: str, checked: bool) -> None:
        """Check or uncheck one option of a multi-choice question."""
        question = self._get_question(question_id)
        if question.type is not QuestionType.MULTI_CHOICE:
            raise InvalidAnswerError(question_id, "only multi-choice options can be toggled")
        if checked:
            question.check_answer([value])
        self._answers.toggle_option(question_id, value, checked)
        self._clamp()

    def clear(self, question_id: str) -> None:
        self._get_question(question_id)
        self._answers.clear_answer(question_id)
        self._clamp()

    # ─── State transfer ───────────────────────────────────────────────────

    def export_state(self) -> dict[str, Any]:
        """Serializable position and answers for an investigation payload."""
        self._clamp()
        return {
            "current_step": self._current,
            "at_review": self._at_review,
            "answers": self._answers.to_dict(),
        }

    def load_state(self, state: dict[str, Any]) -> None:
        """Restore a state produced by ``export_state``.

        Answers are taken as stored. An unknown step id restarts at the first
        visible step; a hidden one is clamped like after an answer change.
        """
        self._answers = AnswerStore(state.get("answers") or {})
        current = state.get("current_step")
        if state.get("at_review"):
            self._current = current if current in self._step_index else None
            self._at_review = True
        elif current in self._step_index:
            self._current = current
            self._at_review = False
        else:
            self.start()
        self._clamp()

    # ─── Internals ────────────────────────────────────────────────────────

    def _get_question(self, question_id: str) -> Question:
        question = self._questions.get(question_id)
        if question is None:
            raise InvalidAnswerError(question_id, "unknown question")
        return question

    def _resolve_step(self, step_id: str | None) -> Step | None:
        if step_id is None:
            return self.current_step
        if step_id not in self._step_index:
            raise UnknownStepError(step_id)
        return self._steps[self._step_index[step_id]]

    def _clamp(self) -> None:
        if self._at_review:
            return
        if self._current is None:
            self.start()
            return

        answers = self._answers.snapshot()
        position = self._step_index[self._current]
        if self._steps[position].is_visible(answers):
            return

        hidden = self._current
        target = None
        for step in reversed(self._steps[:position]):
            if step.is_visible(answers):
                target = step.id
                break
        if target is None:
            for step in self._steps[position + 1:]:
                if step.is_visible(answers):
                    target = step.id
                    break

        if target is None:
            self._current = None
            self._at_review = True
        else:
            self._current = target

        log_json(
            logger,
            logging.DEBUG,
            "wizard_step_clamped",
            hidden_step=hidden,
            current_step=self._current,
            at_review=self._at_review,
        )
