"""Base configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ORIENTATION_NAMES = (
    "ltr",
    "rtl",
    "contextual_ltr",
    "contextual_rtl",
    "unknown",
    "ignore",
)


class Settings(BaseSettings):
    """Application settings.

    Values are read from the environment (prefix ``STRUCTURED_TEXT_``) or
    from a local ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTURED_TEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Default environment
    default_locale: str = Field(
        default="en", description="Locale assumed when an environment has none"
    )
    default_orientation: str = Field(
        default="ltr", description="Orientation of the default environment"
    )
    default_mirrored: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # console or json

    @field_validator("default_orientation")
    @classmethod
    def validate_orientation(cls, v: str) -> str:
        """Validate orientation name."""
        value = v.strip().lower()
        if value not in ORIENTATION_NAMES:
            raise ValueError(
                f"default_orientation must be one of {', '.join(ORIENTATION_NAMES)}"
            )
        return value

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log renderer."""
        value = v.strip().lower()
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        value = v.strip().upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return value
