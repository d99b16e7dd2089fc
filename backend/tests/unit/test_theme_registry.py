"""Unit tests for the theme registry."""

import pytest

from ohshub.core.enums import RiskLevel
from ohshub.core.exceptions import (
    RiskEngineUnavailableError,
    UnknownThemeError,
    WizardConfigurationError,
)
from ohshub.schemas.wizard import Step, validate_wizard
from ohshub.themes import (
    REGISTRY,
    assess_theme,
    get_engine,
    get_schema,
    get_wizard_config,
    list_wizard_configs,
)
from ohshub.themes.vibration import assess_risk as vibration_engine


class TestRegistry:
    """Tests for theme lookup."""

    def test_all_themes_registered_in_display_order(self):
        assert [c.theme_id for c in list_wizard_configs()] == [
            "sound",
            "vibration",
            "bio-agents",
            "hazardous-substances",
            "lighting",
            "physical-load",
            "climate",
        ]

    def test_get_schema_returns_steps(self):
        steps = get_schema("vibration")
        assert [s.id for s in steps] == ["inventory", "current-measures"]
        assert all(isinstance(s, Step) for s in steps)

    def test_get_engine(self):
        assert get_engine("vibration") is vibration_engine
        assert get_engine("hazardous-substances") is not None

    def test_inventory_only_themes_have_no_engine(self):
        for theme_id in ("sound", "bio-agents", "lighting", "physical-load", "climate"):
            assert get_engine(theme_id) is None
            assert not get_wizard_config(theme_id).has_risk_assessment

    def test_unknown_theme(self):
        with pytest.raises(UnknownThemeError):
            get_schema("radiation")
        with pytest.raises(WizardConfigurationError):
            get_engine("radiation")

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            REGISTRY["new"] = REGISTRY["sound"]  # type: ignore[index]

    def test_every_schema_satisfies_wizard_invariants(self):
        for config in list_wizard_configs():
            validate_wizard(config.steps)
            assert config.steps

    def test_hazardous_cmr_step_is_conditional(self):
        steps = {s.id: s for s in get_schema("hazardous-substances")}
        cmr_step = steps["haz-step5-cmr"]
        assert not cmr_step.is_visible({})
        assert cmr_step.is_visible({"haz2-categories": ["cmr-1a"]})


class TestAssessTheme:
    """Tests for running an engine through the registry."""

    def test_runs_engine(self):
        verdict = assess_theme("vibration", {})
        assert verdict.overall_level == RiskLevel.LOW
        assert [f.topic for f in verdict.findings] == ["Trillingen"]

    def test_engine_receives_read_only_answers(self, monkeypatch: pytest.MonkeyPatch):
        seen = []

        def spy(answers):
            seen.append(answers)
            return vibration_engine(answers)

        monkeypatch.setattr("ohshub.themes.get_engine", lambda theme_id: spy)
        answers = {"vib-type": ["hav"]}
        assess_theme("vibration", answers)

        with pytest.raises(TypeError):
            seen[0]["vib-type"] = ["wbv"]
        assert answers == {"vib-type": ["hav"]}

    def test_theme_without_engine(self):
        with pytest.raises(RiskEngineUnavailableError):
            assess_theme("sound", {})

    def test_theme_without_engine_is_configuration_error(self):
        with pytest.raises(WizardConfigurationError):
            assess_theme("climate", {})

    def test_unknown_theme(self):
        with pytest.raises(UnknownThemeError):
            assess_theme("radiation", {})
