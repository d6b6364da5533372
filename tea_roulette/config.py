"""Configuration management with pydantic-settings and validation."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    data_file: Path = Path("data/preferences.json")

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: Path = Path("public")
    log_level: str = "INFO"

    # Terminal client
    api_base_url: str = "http://localhost:3000"
    request_timeout: float = 5.0

    # Wheel animation
    spin_duration: float = 3.0
    extra_spins: int = 6

    model_config = {
        "env_prefix": "TEA_ROULETTE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("port", "spin_duration", "request_timeout")
    @classmethod
    def check_positive(cls, v, info):
        """Ports, durations and timeouts must be greater than zero."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive")
        return v

    @field_validator("extra_spins")
    @classmethod
    def check_not_negative(cls, v):
        if v < 0:
            raise ValueError("extra_spins cannot be negative")
        return v

    @field_validator("host", "log_level", "api_base_url", mode="before")
    @classmethod
    def check_not_empty(cls, v, info):
        """Validate that string settings are not blank."""
        if isinstance(v, str) and v.strip() == "":
            raise ValueError(f"{info.field_name} is empty")
        return v

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    """Load and validate settings from environment.

    Raises:
        ValidationError: If an environment variable holds an invalid value.
    """
    return Settings()
