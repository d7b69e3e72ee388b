import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Compiler settings loaded from environment variables.

    All settings can be configured via ``BLOCKLIST_*`` environment variables
    or a .env file.
    """

    # Logging settings
    log_level: str = "WARNING"  # raised to INFO by --verbose
    log_format: Literal["text", "json"] = "text"

    # I/O settings
    source_encoding: str = "utf-8"
    output_encoding: str = "utf-8"

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        return str(v).strip().lower()

    @field_validator("source_encoding", "output_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate encodings are known to the codecs registry."""
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    model_config = SettingsConfigDict(
        env_prefix="BLOCKLIST_", env_file=".env", extra="ignore"
    )


# Global settings instance
settings = Settings()
