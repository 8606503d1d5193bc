"""Application configuration."""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API
    app_name: str = "Rule Canvas"
    debug: bool = False
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    # Paths
    rules_dir: str = str(Path(__file__).resolve().parent.parent / "rules" / "data")

    # Monitoring
    monitor_interval_seconds: float = 2.0
    cpu_sample_interval: float = 0.1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
