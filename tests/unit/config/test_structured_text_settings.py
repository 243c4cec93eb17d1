"""Test settings loading."""

import pytest
from pydantic import ValidationError

from structured_text.config import Settings, get_settings


class TestSettings:
    """Test structured text settings."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        assert settings.default_locale == "en"
        assert settings.default_orientation == "ltr"
        assert settings.default_mirrored is False
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_environment_variables(self, monkeypatch):
        """Test values are read from prefixed environment variables."""
        monkeypatch.setenv("STRUCTURED_TEXT_DEFAULT_LOCALE", "he_IL")
        monkeypatch.setenv("STRUCTURED_TEXT_DEFAULT_ORIENTATION", "Contextual_RTL")
        monkeypatch.setenv("STRUCTURED_TEXT_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.default_locale == "he_IL"
        assert settings.default_orientation == "contextual_rtl"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("STRUCTURED_TEXT_DEFAULT_ORIENTATION", "sideways"),
            ("STRUCTURED_TEXT_LOG_FORMAT", "xml"),
            ("STRUCTURED_TEXT_LOG_LEVEL", "loud"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        """Test invalid values are rejected."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings()

    def test_cached(self):
        """Test settings are cached."""
        assert get_settings() is get_settings()
