"""Unit tests for the vibration risk engine."""

import pytest

from ohshub.core.enums import RiskLevel
from ohshub.themes.vibration import (
    GAP_COMPLAINTS,
    GAP_DURATION,
    GAP_MEASURES,
    GAP_TYPE,
    assess_risk,
    exposure_level,
)

HAV_HIGH = {
    "vib-type": ["hav"],
    "vib-duration": "long",
    "vib-complaints": "yes",
    "vib-measures-existing": ["none"],
}


class TestBaseline:
    """Tests for the degenerate case without any vibration type."""

    def test_empty_answers_give_single_low_finding(self):
        """No answers: exactly one low 'Trillingen' finding."""
        verdict = assess_risk({})
        assert len(verdict.findings) == 1
        assert verdict.findings[0].topic == "Trillingen"
        assert verdict.findings[0].level == RiskLevel.LOW
        assert verdict.overall_level == RiskLevel.LOW
        assert verdict.recommendations == ()

    def test_empty_answers_report_missing_duration_and_type(self):
        verdict = assess_risk({})
        assert GAP_DURATION in verdict.data_gaps
        assert GAP_TYPE in verdict.data_gaps

    def test_one_gap_per_missing_category(self):
        verdict = assess_risk({})
        assert len(verdict.data_gaps) == len(set(verdict.data_gaps))
        assert verdict.data_gaps == (GAP_DURATION, GAP_TYPE, GAP_COMPLAINTS, GAP_MEASURES)


class TestHandArmVibration:
    """Tests for hand-arm vibration findings."""

    def test_long_duration_with_complaints_is_high(self):
        verdict = assess_risk(HAV_HIGH)
        assert len(verdict.findings) == 1
        assert "Hand-armtrillingen" in verdict.findings[0].topic
        assert verdict.findings[0].level == RiskLevel.HIGH
        assert verdict.overall_level == RiskLevel.HIGH

    def test_recommendations_sorted_and_first_raised_without_measures(self):
        verdict = assess_risk(HAV_HIGH)
        priorities = [r.priority for r in verdict.recommendations]
        assert priorities
        assert priorities == sorted(priorities)
        assert verdict.recommendations[0].priority == 1
        assert verdict.recommendations[0].stage == "Meting"

    def test_existing_measures_change_priority_not_severity(self):
        """Severity depends only on duration and complaints."""
        with_measures = assess_risk({**HAV_HIGH, "vib-measures-existing": ["low-vib-tools"]})
        without_measures = assess_risk(HAV_HIGH)

        assert with_measures.findings[0].level == without_measures.findings[0].level == RiskLevel.HIGH
        assert with_measures.recommendations[0].priority == 2
        assert without_measures.recommendations[0].priority == 1
        assert [r.action for r in with_measures.recommendations] == [
            r.action for r in without_measures.recommendations
        ]

    def test_missing_measures_also_raise_priority(self):
        answers = {k: v for k, v in HAV_HIGH.items() if k != "vib-measures-existing"}
        verdict = assess_risk(answers)
        assert verdict.recommendations[0].priority == 1
        assert GAP_MEASURES in verdict.data_gaps

    def test_unknown_complaints_is_a_data_gap(self):
        verdict = assess_risk({**HAV_HIGH, "vib-complaints": "unknown"})
        assert GAP_COMPLAINTS in verdict.data_gaps
        assert verdict.findings[0].level == RiskLevel.MEDIUM


class TestDecisionTable:
    """Tests for the duration x complaints lookup."""

    @pytest.mark.parametrize(
        ("duration", "complaints", "expected"),
        [
            ("long", True, RiskLevel.HIGH),
            ("long", False, RiskLevel.MEDIUM),
            ("medium", True, RiskLevel.MEDIUM),
            ("medium", False, RiskLevel.LOW),
            ("short", True, RiskLevel.LOW),
            ("short", False, RiskLevel.LOW),
            (None, True, RiskLevel.LOW),
        ],
    )
    def test_exposure_levels(self, duration, complaints, expected):
        assert exposure_level(duration, complaints) == expected


class TestBothTypes:
    """Tests for combined hand-arm and whole-body vibration."""

    def test_one_finding_per_selected_type(self):
        verdict = assess_risk({**HAV_HIGH, "vib-type": ["hav", "wbv"]})
        topics = [f.topic for f in verdict.findings]
        assert topics == ["Hand-armtrillingen (HAV)", "Hele-lichaamstrillingen (WBV)"]
        assert len(verdict.recommendations) == 7

    def test_whole_body_only(self):
        verdict = assess_risk({"vib-type": ["wbv"], "vib-duration": "medium", "vib-complaints": "no"})
        assert [f.topic for f in verdict.findings] == ["Hele-lichaamstrillingen (WBV)"]
        assert verdict.overall_level == RiskLevel.LOW


class TestMalformedAnswers:
    """Tests for lenient handling of malformed answers."""

    def test_scalar_type_reads_as_no_selection(self):
        verdict = assess_risk({"vib-type": "hav", "vib-duration": "long"})
        assert [f.topic for f in verdict.findings] == ["Trillingen"]
        assert GAP_TYPE in verdict.data_gaps

    def test_undeclared_duration_is_treated_as_missing(self):
        verdict = assess_risk({"vib-type": ["hav"], "vib-duration": "all-day", "vib-complaints": "yes"})
        assert verdict.findings[0].level == RiskLevel.LOW
        assert GAP_DURATION in verdict.data_gaps

    def test_answers_are_not_mutated(self):
        answers = {k: list(v) if isinstance(v, list) else v for k, v in HAV_HIGH.items()}
        assess_risk(answers)
        assert answers == HAV_HIGH
