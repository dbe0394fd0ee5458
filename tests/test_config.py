"""Tests for configuration."""

import pytest
from pathlib import Path
from pydantic import ValidationError

from markdown_toggle import config
from markdown_toggle.config import Settings, get_settings, load_settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.font_family == "Helvetica"
        assert settings.code_font_family == "Menlo"
        assert settings.font_size == 16.0
        assert settings.default_output_format == ".md"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MARKDOWN_TOGGLE_FONT_SIZE", "18")
        monkeypatch.setenv("MARKDOWN_TOGGLE_CODE_FONT_FAMILY", "Courier")
        settings = Settings()
        assert settings.font_size == 18.0
        assert settings.code_font_family == "Courier"

    def test_invalid_color_rejected(self):
        with pytest.raises(ValidationError):
            Settings(MARKDOWN_TOGGLE_TEXT_COLOR="black")

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValidationError):
            Settings(MARKDOWN_TOGGLE_FONT_SIZE=0)


class TestSettingsLoading:
    """Tests for the global settings accessors."""

    @pytest.fixture(autouse=True)
    def reset_settings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "_settings", None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_load_settings_from_env_file(self, tmp_path: Path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("MARKDOWN_TOGGLE_FONT_FAMILY=Georgia\n")

        settings = load_settings(env_file)

        assert settings.font_family == "Georgia"
        assert get_settings() is settings
