"""Pydantic schemas for risk assessment results."""

from pydantic import BaseModel, ConfigDict, Field

from ohshub.core.enums import RiskLevel


class Finding(BaseModel):
    """One assessed hazard sub-topic."""

    model_config = ConfigDict(frozen=True)

    topic: str
    level: RiskLevel
    summary: str
    detail: str | None = None
    legal_basis: str | None = None


class Recommendation(BaseModel):
    """One prioritized mitigation action.

    ``stage`` is the mitigation-hierarchy category the action belongs to
    (e.g. "Meting", "Technisch", "Organisatorisch"). Lower ``priority`` means
    more urgent.
    """

    model_config = ConfigDict(frozen=True)

    priority: int = Field(..., ge=1)
    stage: str
    action: str
    rationale: str
    deadline: str | None = None
    legal_basis: str | None = None


class Verdict(BaseModel):
    """Risk assessment result for one answer set."""

    model_config = ConfigDict(frozen=True)

    overall_level: RiskLevel = RiskLevel.UNKNOWN
    findings: tuple[Finding, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()
    data_gaps: tuple[str, ...] = ()
