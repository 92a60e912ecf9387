"""Application configuration using Pydantic BaseSettings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """ABR ladder configuration loaded from environment variables."""

    model_config = {"env_prefix": "ABRLADDER_", "env_file": ".env", "extra": "ignore"}

    # Logging
    log_level: str = "INFO"

    # Computation
    bitrate_significant_figures: int = 3
    enforce_video_limits: bool = True

    # API
    api_title: str = "ABR Ladder"
    api_version: str = "0.1.0"


def get_settings() -> Settings:
    """Return settings instance."""
    return Settings()
