"""Per-category log levels for the article service.

Each ``log_level_*`` setting governs a group of logger names, so SQL echo
or httpx chatter can be turned down while article writes stay at INFO.
Called once from the FastAPI lifespan.
"""

import logging
import sys

from learninghub.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_articles": (
        "learninghub.application",
        "learninghub.presentation",
        "learninghub.infrastructure.client",
    ),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and category levels; return the level chosen per category."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        # uvicorn normally installs one; scripts and tests may not.
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field, logger_names in CATEGORIES.items():
        level = _parse_level(getattr(settings, field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
        applied[field] = level

    logging.getLogger(__name__).debug(
        "Log levels: %s",
        ", ".join(f"{field}={logging.getLevelName(level)}" for field, level in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
