from .base import Base, UTCDateTime
from .session import (
    engine,
    async_session_factory,
    build_engine,
    build_session_factory,
    create_tables,
    get_db_session,
)
from .models import ArticleModel

__all__ = [
    "Base",
    "UTCDateTime",
    "engine",
    "async_session_factory",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "get_db_session",
    "ArticleModel",
]
