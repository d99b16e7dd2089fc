"""Pydantic schemas for theme, navigation and assessment endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ohshub.schemas.wizard import Step

AnswerPayload = dict[str, str | list[str]]


class ThemeSummary(BaseModel):
    """Theme entry in the theme list."""

    id: str
    name: str
    description: str
    has_risk_assessment: bool


class ThemeDetail(ThemeSummary):
    """Theme metadata with its full step schema."""

    intro: str
    steps: list[Step]


class NavigationRequest(BaseModel):
    """Wizard position and answers held by the client, plus the move to make.

    ``updates`` are checked against their questions and stored before the
    action is applied.
    """

    model_config = ConfigDict(extra="forbid")

    answers: AnswerPayload = Field(default_factory=dict)
    updates: AnswerPayload = Field(default_factory=dict)
    current_step: str | None = Field(None, max_length=100)
    at_review: bool = False
    action: Literal["start", "next", "previous", "goto", "reset"] = "start"
    target_step: str | None = Field(None, max_length=100)
    require_complete: bool = False


class NavigationResponse(BaseModel):
    """New wizard position after a navigation request."""

    current_step: str | None
    at_review: bool
    moved: bool
    visible_steps: list[str]
    visible_questions: list[str]
    missing_required: list[str]
    progress: int = Field(..., ge=0, le=100)
    answers: AnswerPayload


class AssessmentRequest(BaseModel):
    """Answers to assess."""

    model_config = ConfigDict(extra="forbid")

    answers: AnswerPayload = Field(default_factory=dict)


class SummaryRequest(BaseModel):
    """Answers to summarize as plain text."""

    model_config = ConfigDict(extra="forbid")

    answers: AnswerPayload = Field(default_factory=dict)
    include_assessment: bool = True


class SummaryResponse(BaseModel):
    text: str
