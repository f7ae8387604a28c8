"""Liveness probe. Reads settings only; never touches the database."""

from fastapi import APIRouter

from learninghub.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "adminConfigured": bool(settings.admin_tokens),
    }
