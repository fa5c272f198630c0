"""Tests for application settings."""

from pathlib import Path

from showjumping.config.settings import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default paths."""
        monkeypatch.delenv("SHOWJUMPING_DATA_PATH", raising=False)
        monkeypatch.delenv("SHOWJUMPING_COMPETITION", raising=False)
        monkeypatch.delenv("SHOWJUMPING_FORMAT_PATH", raising=False)

        settings = Settings(_env_file=None)

        assert settings.competition_dir == Path("data") / "SEDE"
        assert settings.format_file is None
        assert settings.format_name == "three_day"

    def test_environment_overrides(self, monkeypatch):
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("SHOWJUMPING_DATA_PATH", "/srv/results")
        monkeypatch.setenv("SHOWJUMPING_COMPETITION", "MADRID")
        monkeypatch.setenv("SHOWJUMPING_FORMAT_PATH", "formats/indoor.json")
        monkeypatch.setenv("SHOWJUMPING_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.competition_dir == Path("/srv/results/MADRID")
        assert settings.format_file == Path("formats/indoor.json")
        assert settings.debug is True
