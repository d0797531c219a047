"""Settings for Docker API schema operations.

Provides centralized configuration using Pydantic BaseSettings
with environment variable support.
"""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class SchemaSettings(BaseSettings):
    """Codec and logging configuration."""

    strict_validation: bool = Field(
        False,
        alias="DOCKER_SCHEMA_STRICT",
        description="Reject payloads that need type coercion",
    )

    log_level: str = Field("INFO", alias="LOG_LEVEL", description="Logging level")

    log_dir: str | None = Field(
        None, alias="LOG_DIR", description="Directory for log files (console only when unset)"
    )

    log_max_file_size_mb: int = Field(
        10, ge=1, alias="LOG_MAX_FILE_SIZE_MB", description="Log file size before truncation"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


def load_settings(**overrides) -> SchemaSettings:
    """Build settings from the environment, applying keyword overrides."""
    try:
        return SchemaSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


# Global settings instance
settings = load_settings()
