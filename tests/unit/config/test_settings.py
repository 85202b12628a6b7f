"""Tests for application settings."""

import logging

import pytest

from gitiary.config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in (
            "DEFAULT_IMPACT_RANGE",
            "COMPARISON_PERIOD_DAYS",
            "STORY_PERIOD_DAYS",
            "MIN_HEAT_YEAR",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_impact_range == "90"
        assert settings.comparison_period_days == 360
        assert settings.story_period_days == 30
        assert settings.min_heat_year == 2025

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MIN_HEAT_YEAR", "2023")
        monkeypatch.setenv("default_impact_range", "all")

        settings = Settings(_env_file=None)

        assert settings.min_heat_year == 2023
        assert settings.default_impact_range == "all"

    def test_log_level(self) -> None:
        assert Settings(_env_file=None, log_level="debug").log_level_value == logging.DEBUG
        assert Settings(_env_file=None, log_level="nonsense").log_level_value == logging.INFO
