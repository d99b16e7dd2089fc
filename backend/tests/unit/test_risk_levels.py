"""Unit tests for risk level ordering and verdict aggregation."""

from ohshub.core.aggregation import VerdictBuilder, max_level, sort_recommendations
from ohshub.core.enums import RiskLevel
from ohshub.schemas.verdict import Recommendation


def _rec(priority: int, action: str) -> Recommendation:
    return Recommendation(priority=priority, stage="Technisch", action=action, rationale="-")


class TestRiskLevelOrder:
    """Tests for the severity order."""

    def test_levels_are_totally_ordered(self):
        """Ranks increase strictly from unknown to critical."""
        ordered = [
            RiskLevel.UNKNOWN,
            RiskLevel.LOW,
            RiskLevel.MEDIUM,
            RiskLevel.HIGH,
            RiskLevel.CRITICAL,
        ]
        ranks = [RiskLevel.get_severity_rank(level) for level in ordered]
        assert ranks == sorted(set(ranks))

    def test_outranks_is_strict(self):
        assert RiskLevel.HIGH.outranks(RiskLevel.MEDIUM)
        assert not RiskLevel.MEDIUM.outranks(RiskLevel.MEDIUM)
        assert not RiskLevel.UNKNOWN.outranks(RiskLevel.LOW)


class TestMaxLevel:
    """Tests for overall level aggregation."""

    def test_empty_is_unknown(self):
        """No findings aggregate to unknown."""
        assert max_level([]) == RiskLevel.UNKNOWN

    def test_any_real_level_overrides_unknown(self):
        assert max_level([RiskLevel.UNKNOWN, RiskLevel.LOW]) == RiskLevel.LOW

    def test_picks_most_severe_regardless_of_position(self):
        levels = [RiskLevel.MEDIUM, RiskLevel.CRITICAL, RiskLevel.LOW, RiskLevel.HIGH]
        assert max_level(levels) == RiskLevel.CRITICAL
        assert max_level(reversed(levels)) == RiskLevel.CRITICAL


class TestRecommendationOrder:
    """Tests for recommendation sorting."""

    def test_sorted_ascending_by_priority(self):
        recs = [_rec(3, "c"), _rec(1, "a"), _rec(2, "b")]
        assert [r.action for r in sort_recommendations(recs)] == ["a", "b", "c"]

    def test_ties_keep_insertion_order(self):
        """Equal priorities keep the order in which they were added."""
        recs = [_rec(2, "first"), _rec(1, "urgent"), _rec(2, "second"), _rec(2, "third")]
        assert [r.action for r in sort_recommendations(recs)] == [
            "urgent",
            "first",
            "second",
            "third",
        ]


class TestVerdictBuilder:
    """Tests for the verdict builder."""

    def test_empty_builder_gives_unknown_verdict(self):
        verdict = VerdictBuilder().build()
        assert verdict.overall_level == RiskLevel.UNKNOWN
        assert verdict.findings == ()
        assert verdict.recommendations == ()
        assert verdict.data_gaps == ()

    def test_data_gaps_are_recorded_once(self):
        builder = VerdictBuilder()
        builder.add_data_gap("Duur ontbreekt.")
        builder.add_data_gap("Type ontbreekt.")
        builder.add_data_gap("Duur ontbreekt.")
        assert builder.build().data_gaps == ("Duur ontbreekt.", "Type ontbreekt.")

    def test_overall_level_is_max_of_findings(self):
        builder = VerdictBuilder()
        builder.add_finding("A", RiskLevel.LOW, "a")
        builder.add_finding("B", RiskLevel.HIGH, "b")
        builder.add_finding("C", RiskLevel.MEDIUM, "c")
        verdict = builder.build()
        assert verdict.overall_level == RiskLevel.HIGH
        assert [f.topic for f in verdict.findings] == ["A", "B", "C"]
