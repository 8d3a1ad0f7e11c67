"""Configuration settings for Speaking Tracker."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    data_file: str = "./data.json"
    settings_file: str = "./settings.json"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Import
    import_timeout_seconds: float = 15.0

    # Service
    service_name: str = "speaking-tracker"
    service_version: str = "0.1.0"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
