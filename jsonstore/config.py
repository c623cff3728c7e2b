from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "JSON Store API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Local file (sqlite:///...) or remote endpoint (postgresql://...)
    database_url: str = "sqlite:////tmp/json_storage.db"
    database_auth_token: str = ""
    database_echo: bool = False

    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # Production mutation lock: "environment" or "none"
    mutation_guard: str = "environment"
    mutation_lock_header: str = "X-Client"
    mutation_lock_client: str = "public-web"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_store: str = "INFO"            # record service + repository

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @field_validator("api_prefix")
    @classmethod
    def _normalize_api_prefix(cls, value: str) -> str:
        """Force the ``/segment`` form: one leading slash, no trailing slash."""
        normalized = "/" + value.strip().strip("/")
        if normalized == "/":
            raise ValueError("api_prefix must name a path, e.g. /api")
        return normalized

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
