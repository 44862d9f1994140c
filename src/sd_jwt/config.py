"""
Library configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Library configuration from environment variables.

    All settings can be overridden via environment variables prefixed with ``SD_JWT_``.
    The default hash algorithm is not configurable: ``sha-256`` is mandated
    when ``_sd_alg`` is absent.
    """

    # Salt generation
    salt_bytes: int = Field(default=32, ge=1)  # 256 bits; 128 is the recommended minimum

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {
        "env_prefix": "SD_JWT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings instance."""
    return settings
