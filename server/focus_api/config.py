"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """Focus API settings, read from FOCUS_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="FOCUS_", extra="ignore")

    # Directory holding focus_sessions.db; FOCUS_DATA_PATH wins over DATA_PATH
    data_path: str = Field(default_factory=lambda: os.getenv("DATA_PATH", PROJECT_ROOT))

    @property
    def sessions_db_path(self) -> str:
        return os.path.join(self.data_path, "focus_sessions.db")

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083
    log_level: str = "INFO"

    # Stats window used when no dates are given
    default_stats_days: int = 30

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
