"""Tests for application settings."""

from pathlib import Path

from unblock.settings import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch) -> None:
        """Test default values."""
        for name in ("LEVELS_PATH", "WRAP_LEVELS", "AUTO_ADVANCE", "LOG_LEVEL"):
            monkeypatch.delenv(f"UNBLOCK_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.levels_path is None
        assert settings.wrap_levels is False
        assert settings.auto_advance is True
        assert settings.log_level == "INFO"

    def test_from_environment(self, monkeypatch, tmp_path) -> None:
        """Test values are read from UNBLOCK_ environment variables."""
        monkeypatch.setenv("UNBLOCK_LEVELS_PATH", str(tmp_path))
        monkeypatch.setenv("UNBLOCK_WRAP_LEVELS", "true")
        monkeypatch.setenv("UNBLOCK_AUTO_ADVANCE", "false")
        monkeypatch.setenv("UNBLOCK_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.levels_path == Path(tmp_path)
        assert settings.wrap_levels is True
        assert settings.auto_advance is False
        assert settings.log_level == "DEBUG"
