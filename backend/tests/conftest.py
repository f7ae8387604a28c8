"""Shared fixtures: in-memory SQLite database and an API client bound to it."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from learninghub.config import get_settings
from learninghub.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
    get_db_session,
)

ADMIN_TOKEN = "test-admin-token"
ADMIN_ID = "admin-1"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(db_engine)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def admin_tokens(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Configure a single admin token for the duration of a test."""
    tokens = {ADMIN_TOKEN: ADMIN_ID}
    monkeypatch.setattr(get_settings(), "admin_tokens", tokens)
    return tokens


@pytest_asyncio.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
    admin_tokens: dict[str, str],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app, with each request on its own committed session."""
    from learninghub.main import app

    async def _override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
