"""Verdict aggregation helpers shared by all risk engines."""

from collections.abc import Iterable

from ohshub.core.enums import RiskLevel
from ohshub.schemas.verdict import Finding, Recommendation, Verdict


def max_level(levels: Iterable[RiskLevel]) -> RiskLevel:
    """Return the most severe level, UNKNOWN for an empty input.

    Single pass keeping the running maximum under the severity order.
    """
    highest = RiskLevel.UNKNOWN
    for level in levels:
        if level.outranks(highest):
            highest = level
    return highest


def sort_recommendations(
    recommendations: Iterable[Recommendation],
) -> list[Recommendation]:
    """Order by ascending priority; equal priorities keep insertion order."""
    return sorted(recommendations, key=lambda r: r.priority)


class VerdictBuilder:
    """Collects findings, recommendations and data gaps for one engine run."""

    def __init__(self):
        self._findings: list[Finding] = []
        self._recommendations: list[Recommendation] = []
        self._data_gaps: list[str] = []

    @property
    def has_findings(self) -> bool:
        return len(self._findings) > 0

    def add_finding(
        self,
        topic: str,
        level: RiskLevel,
        summary: str,
        detail: str | None = None,
        legal_basis: str | None = None,
    ) -> Finding:
        finding = Finding(
            topic=topic,
            level=level,
            summary=summary,
            detail=detail,
            legal_basis=legal_basis,
        )
        self._findings.append(finding)
        return finding

    def add_recommendation(
        self,
        priority: int,
        stage: str,
        action: str,
        rationale: str,
        deadline: str | None = None,
        legal_basis: str | None = None,
    ) -> Recommendation:
        recommendation = Recommendation(
            priority=priority,
            stage=stage,
            action=action,
            rationale=rationale,
            deadline=deadline,
            legal_basis=legal_basis,
        )
        self._recommendations.append(recommendation)
        return recommendation

    def add_data_gap(self, description: str) -> None:
        """Record a missing information category once."""
        if description not in self._data_gaps:
            self._data_gaps.append(description)

    def build(self) -> Verdict:
        return Verdict(
            overall_level=max_level(f.level for f in self._findings),
            findings=tuple(self._findings),
            recommendations=tuple(sort_recommendations(self._recommendations)),
            data_gaps=tuple(self._data_gaps),
        )
