from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Learning Hub API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./learninghub.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Admin bearer tokens → admin id, e.g. ADMIN_TOKENS='{"s3cret": "admin-1"}'
    admin_tokens: dict[str, str] = {}

    # Articles
    slug_exceptions: dict[str, str] = {}     # merged over the built-in C++/C# table
    default_article_color: str = "blue"

    # Base URL the HTTP client uses to reach the article API
    api_base_url: str = "http://localhost:8000/api/v1"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_articles: str = "INFO"         # article service, pipeline and views

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
