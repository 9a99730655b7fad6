"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


# Reported by /health when no live database is connected
DEFAULT_DB_NAME = "placement_portal"


class Settings(BaseSettings):
    # MongoDB (prefer 127.0.0.1 over localhost to avoid ::1 resolution)
    mongo_uri: str = "mongodb://127.0.0.1:27017"
    mongo_db: str = DEFAULT_DB_NAME
    mongo_connect_timeout_seconds: float = 10

    # HTTP
    frontend_origins: str = "http://localhost:5173,http://localhost:5174"
    port: int = 8081

    # App
    log_level: str = "INFO"
    debug: bool = False

    @property
    def allowed_origins(self) -> List[str]:
        """Comma separated FRONTEND_ORIGINS as a clean list."""
        return [o.strip() for o in self.frontend_origins.split(",") if o.strip()]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
