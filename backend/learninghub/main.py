"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learninghub.config import get_settings
from learninghub.infrastructure.database import create_tables, engine
from learninghub.infrastructure.logging.log_config import setup_logging
from learninghub.presentation.api.router import router as api_router
from learninghub.presentation.web.pages import router as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create tables."""
    setup_logging()

    await create_tables(engine)

    settings = get_settings()
    if not settings.admin_tokens:
        logger.warning("ADMIN_TOKENS is not configured; article writes will be rejected.")
    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes and public pages
    app.include_router(api_router)
    app.include_router(pages_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "learninghub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
