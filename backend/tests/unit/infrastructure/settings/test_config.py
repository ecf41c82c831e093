"""Unit tests for environment configuration."""

import os

import pytest

from infrastructure.config import (
    EngineSettings,
    get_engine_settings,
    get_log_json,
    get_log_level,
    get_min_daily_calories,
    load_environment,
)


class TestMinDailyCalories:
    """Test HEALTH_MIN_DAILY_CALORIES parsing."""

    def test_default(self, monkeypatch):
        """Test default floor when unset."""
        monkeypatch.delenv("HEALTH_MIN_DAILY_CALORIES", raising=False)

        assert get_min_daily_calories() == 1000

    def test_blank_uses_default(self, monkeypatch):
        """Test blank value falls back to default."""
        monkeypatch.setenv("HEALTH_MIN_DAILY_CALORIES", "  ")

        assert get_min_daily_calories() == 1000

    def test_override(self, monkeypatch):
        """Test integer override."""
        monkeypatch.setenv("HEALTH_MIN_DAILY_CALORIES", "1200")

        assert get_min_daily_calories() == 1200

    def test_invalid_value(self, monkeypatch):
        """Test non-integer value names the variable."""
        monkeypatch.setenv("HEALTH_MIN_DAILY_CALORIES", "lots")

        with pytest.raises(ValueError, match="HEALTH_MIN_DAILY_CALORIES"):
            get_min_daily_calories()


class TestLogging:
    """Test logging variables."""

    def test_log_level_upper_cased(self, monkeypatch):
        """Test LOG_LEVEL normalisation."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_log_level() == "DEBUG"

    def test_log_level_default(self, monkeypatch):
        """Test INFO default."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert get_log_level() == "INFO"

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("1", True), ("YES", True), ("false", False), ("", False)],
    )
    def test_log_json(self, monkeypatch, value, expected):
        """Test LOG_JSON truthy values."""
        monkeypatch.setenv("LOG_JSON", value)

        assert get_log_json() is expected


def test_get_engine_settings(monkeypatch) -> None:
    """Test settings snapshot from the environment."""
    monkeypatch.setenv("HEALTH_MIN_DAILY_CALORIES", "900")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_JSON", "true")

    assert get_engine_settings() == EngineSettings(
        min_daily_calories=900, log_level="WARNING", log_json=True
    )


def test_load_environment_reads_file(tmp_path, monkeypatch) -> None:
    """Test values are loaded from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("HEALTH_MIN_DAILY_CALORIES=1300\n")
    # Register the variable so monkeypatch removes it on teardown
    monkeypatch.setenv("HEALTH_MIN_DAILY_CALORIES", "")
    monkeypatch.delenv("HEALTH_MIN_DAILY_CALORIES")

    assert load_environment(env_file) is True
    assert os.environ["HEALTH_MIN_DAILY_CALORIES"] == "1300"
    assert get_min_daily_calories() == 1300


def test_load_environment_keeps_existing_values(tmp_path, monkeypatch) -> None:
    """Test process environment wins over the file."""
    env_file = tmp_path / ".env"
    env_file.write_text("HEALTH_MIN_DAILY_CALORIES=1300\n")
    monkeypatch.setenv("HEALTH_MIN_DAILY_CALORIES", "1500")

    load_environment(env_file)

    assert get_min_daily_calories() == 1500


def test_load_environment_missing_file(tmp_path) -> None:
    """Test missing file is not an error."""
    assert load_environment(tmp_path / "missing.env") is False
