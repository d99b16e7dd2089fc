"""Pydantic schemas for wizard steps, questions and visibility conditions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ohshub.core.answers import AnswerSet, get_choice, get_choices, has_answer
from ohshub.core.enums import QuestionType
from ohshub.core.exceptions import InvalidAnswerError, WizardConfigurationError


# ─── Visibility conditions ────────────────────────────────────────────────────


class _ConditionBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def evaluate(self, answers: AnswerSet) -> bool:
        raise NotImplementedError

    def question_ids(self) -> set[str]:
        raise NotImplementedError


class AnswerIn(_ConditionBase):
    """True when a single-choice answer is one of ``values``."""

    kind: Literal["answer_in"] = "answer_in"
    question_id: str
    values: tuple[str, ...] = Field(..., min_length=1)

    def evaluate(self, answers: AnswerSet) -> bool:
        return get_choice(answers, self.question_id, self.values) is not None

    def question_ids(self) -> set[str]:
        return {self.question_id}


class AnswerIncludes(_ConditionBase):
    """True when a multi-choice answer includes any of ``values``."""

    kind: Literal["answer_includes"] = "answer_includes"
    question_id: str
    values: tuple[str, ...] = Field(..., min_length=1)

    def evaluate(self, answers: AnswerSet) -> bool:
        return len(get_choices(answers, self.question_id, self.values)) > 0

    def question_ids(self) -> set[str]:
        return {self.question_id}


class Answered(_ConditionBase):
    """True when a question holds a non-empty answer."""

    kind: Literal["answered"] = "answered"
    question_id: str

    def evaluate(self, answers: AnswerSet) -> bool:
        return has_answer(answers, self.question_id)

    def question_ids(self) -> set[str]:
        return {self.question_id}


class Not(_ConditionBase):
    kind: Literal["not"] = "not"
    condition: Condition

    def evaluate(self, answers: AnswerSet) -> bool:
        return not self.condition.evaluate(answers)

    def question_ids(self) -> set[str]:
        return self.condition.question_ids()


class AllOf(_ConditionBase):
    kind: Literal["all_of"] = "all_of"
    conditions: tuple[Condition, ...] = Field(..., min_length=1)

    def evaluate(self, answers: AnswerSet) -> bool:
        return all(c.evaluate(answers) for c in self.conditions)

    def question_ids(self) -> set[str]:
        return set().union(*(c.question_ids() for c in self.conditions))


class AnyOf(_ConditionBase):
    kind: Literal["any_of"] = "any_of"
    conditions: tuple[Condition, ...] = Field(..., min_length=1)

    def evaluate(self, answers: AnswerSet) -> bool:
        return any(c.evaluate(answers) for c in self.conditions)

    def question_ids(self) -> set[str]:
        return set().union(*(c.question_ids() for c in self.conditions))


Condition = Annotated[
    Union[AnswerIn, AnswerIncludes, Answered, Not, AllOf, AnyOf],
    Field(discriminator="kind"),
]

Not.model_rebuild()
AllOf.model_rebuild()
AnyOf.model_rebuild()


def answer_in(question_id: str, *values: str) -> AnswerIn:
    return AnswerIn(question_id=question_id, values=values)


def includes(question_id: str, *values: str) -> AnswerIncludes:
    return AnswerIncludes(question_id=question_id, values=values)


def answered(question_id: str) -> Answered:
    return Answered(question_id=question_id)


def not_(condition: Condition) -> Not:
    return Not(condition=condition)


def all_of(*conditions: Condition) -> AllOf:
    return AllOf(conditions=conditions)


def any_of(*conditions: Condition) -> AnyOf:
    return AnyOf(conditions=conditions)


# ─── Questions and steps ──────────────────────────────────────────────────────


class QuestionOption(BaseModel):
    """Selectable option of a choice question."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str = Field(..., min_length=1)
    label: str


class Question(BaseModel):
    """Single wizard question."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, max_length=100)
    label: str
    type: QuestionType
    required: bool | None = None
    help_text: str | None = None
    options: tuple[QuestionOption, ...] = ()
    placeholder: str | None = None
    visible_when: Condition | None = None

    @model_validator(mode="after")
    def validate_options(self) -> Question:
        values = [option.value for option in self.options]
        if len(values) != len(set(values)):
            raise ValueError(f"question {self.id} declares duplicate option values")
        if self.type.is_choice and not self.options:
            raise ValueError(f"choice question {self.id} declares no options")
        if not self.type.is_choice and self.options:
            raise ValueError(f"free-text question {self.id} cannot declare options")
        return self

    @property
    def is_required(self) -> bool:
        """Explicit ``required`` wins; otherwise choice questions are required."""
        if self.required is not None:
            return self.required
        return self.type.is_choice

    @property
    def option_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.options)

    def is_visible(self, answers: AnswerSet) -> bool:
        return self.visible_when is None or self.visible_when.evaluate(answers)

    def is_answered(self, answers: AnswerSet) -> bool:
        value = answers.get(self.id)
        if self.type is QuestionType.MULTI_CHOICE:
            return isinstance(value, (list, tuple)) and len(value) > 0
        return isinstance(value, str) and len(value) > 0

    def label_for(self, value: str) -> str:
        """Option label for a stored value; unknown values pass through."""
        for option in self.options:
            if option.value == value:
                return option.label
        return value

    def check_answer(self, value: Any) -> None:
        """Validate a value before it is stored for this question.

        Raises:
            InvalidAnswerError: If the value has the wrong shape or is not one
                of the declared options
        """
        if self.type is QuestionType.MULTI_CHOICE:
            if not isinstance(value, (list, tuple)):
                raise InvalidAnswerError(self.id, "multi-choice answer must be a list")
            unknown = [v for v in value if v not in self.option_values]
            if unknown:
                raise InvalidAnswerError(self.id, f"unknown option values {unknown}")
            return

        if not isinstance(value, str):
            raise InvalidAnswerError(self.id, "answer must be a single string")
        if self.type is QuestionType.SINGLE_CHOICE and value not in self.option_values:
            raise InvalidAnswerError(self.id, f"unknown option value {value!r}")


class Step(BaseModel):
    """Wizard step grouping an ordered list of questions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, max_length=100)
    title: str
    description: str
    questions: tuple[Question, ...] = ()
    visible_when: Condition | None = None

    def is_visible(self, answers: AnswerSet) -> bool:
        return self.visible_when is None or self.visible_when.evaluate(answers)

    def visible_questions(self, answers: AnswerSet) -> list[Question]:
        return [q for q in self.questions if q.is_visible(answers)]


def validate_wizard(steps: Sequence[Step]) -> None:
    """Check the cross-step invariants of a wizard schema.

    Step ids must be unique, question ids must be unique across the whole
    wizard (answers share one flat mapping) and every visibility condition
    must reference a question of the same wizard.

    Raises:
        WizardConfigurationError: On the first violated invariant
    """
    step_ids: set[str] = set()
    question_ids: set[str] = set()
    conditions: list[tuple[str, Any]] = []

    for step in steps:
        if step.id in step_ids:
            raise WizardConfigurationError(f"Duplicate step id: {step.id}")
        step_ids.add(step.id)
        if step.visible_when is not None:
            conditions.append((step.id, step.visible_when))

        for question in step.questions:
            if question.id in question_ids:
                raise WizardConfigurationError(f"Duplicate question id: {question.id}")
            question_ids.add(question.id)
            if question.visible_when is not None:
                conditions.append((question.id, question.visible_when))

    for owner, condition in conditions:
        missing = condition.question_ids() - question_ids
        if missing:
            raise WizardConfigurationError(
                f"Visibility condition of {owner} references unknown questions: {sorted(missing)}"
            )


def build_steps(raw_steps: Iterable[dict]) -> list[Step]:
    """Validate plain step definitions into an immutable wizard schema.

    Raises:
        WizardConfigurationError: If a definition is malformed or the
            resulting wizard breaks an invariant
    """
    try:
        steps = [Step.model_validate(raw) for raw in raw_steps]
    except ValueError as e:
        raise WizardConfigurationError(f"Invalid wizard definition: {e}") from e
    validate_wizard(steps)
    return steps
