"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB (URI is required at startup, not at import)
    mongodb_uri: Optional[str] = None
    mongodb_db: str = "studyconnect"
    mongodb_timeout_ms: int = 5000
    # upper bound for the /health ping
    mongodb_health_timeout_ms: int = 500

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["https://studevoge.onrender.com"]

    # Password hashing cost factor
    bcrypt_rounds: int = 10

    # App
    environment: str = "development"
    log_level: str = "INFO"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
