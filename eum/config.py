"""Configuration for beacon encoding and decoding.

Uses Pydantic Settings for environment-based configuration. Every setting can
be overridden with an ``EUM_`` prefixed environment variable or a ``.env`` file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from eum.logging import configure_logging


class BeaconSettings(BaseSettings):
    """Beacon library configuration."""

    # Logging
    service_name: str = Field(default="eum-beacon", description="Service name")
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=True, description="Render logs as JSON")

    # Codec
    json_indent: Optional[int] = Field(
        default=None, description="Indentation of encoded beacons (None = compact)"
    )
    max_payload_bytes: int = Field(
        default=1024 * 1024, description="Largest beacon payload accepted for decoding"
    )
    skip_unknown_records: bool = Field(
        default=False, description="Drop records of unregistered types instead of failing"
    )

    model_config = SettingsConfigDict(
        env_prefix="EUM_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("max_payload_bytes")
    @classmethod
    def validate_max_payload_bytes(cls, v: int) -> int:
        """Validate payload limit is positive."""
        if v <= 0:
            raise ValueError("max_payload_bytes must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


# Global settings instance
_settings_instance: BeaconSettings | None = None


def get_settings() -> BeaconSettings:
    """Get or create settings instance.

    Returns:
        BeaconSettings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = BeaconSettings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None


def configure_from_settings(settings: Optional[BeaconSettings] = None) -> BeaconSettings:
    """Apply the logging part of the settings.

    Args:
        settings: Settings to apply; defaults to the cached instance

    Returns:
        The applied settings
    """
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )
    return settings
