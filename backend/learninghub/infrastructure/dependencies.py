"""FastAPI dependency injection — wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from learninghub.application.interfaces import Credentials
from learninghub.application.services import ArticleService, ArticleWritePipeline
from learninghub.config import get_settings
from learninghub.domain.entities import AdminPrincipal
from learninghub.domain.slug import SlugDeriver
from learninghub.infrastructure.client import ArticleApiClient, ServiceArticleGateway
from learninghub.infrastructure.database.session import get_db_session
from learninghub.infrastructure.database.repositories import SQLAlchemyArticleRepository

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def resolve_principal(credentials: Credentials) -> AdminPrincipal:
    """Look up the admin that owns a bearer token. Raises PermissionError if unknown."""
    admin_id = get_settings().admin_tokens.get(credentials.token)
    if admin_id is None:
        raise PermissionError("Unknown admin token")
    return AdminPrincipal(admin_id=admin_id)


async def get_admin_principal(
    authorization: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> AdminPrincipal:
    """Require a configured admin bearer token; 401 otherwise."""
    if authorization is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return resolve_principal(Credentials(token=authorization.credentials))
    except PermissionError:
        logger.warning("Rejected write with an unknown admin token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    settings = get_settings()
    repository = SQLAlchemyArticleRepository(session)
    pipeline = ArticleWritePipeline(SlugDeriver(settings.slug_exceptions))
    yield ArticleService(
        repository,
        pipeline=pipeline,
        default_color=settings.default_article_color,
    )


async def get_article_gateway(
    service: ArticleService = Depends(get_article_service),
) -> AsyncGenerator[ServiceArticleGateway, None]:
    """Provides the in-process gateway used by the server-rendered pages."""
    yield ServiceArticleGateway(service, principal_resolver=resolve_principal)


def get_article_api_client() -> ArticleApiClient:
    """Provides the HTTP gateway pointed at the configured article API."""
    return ArticleApiClient(base_url=get_settings().api_base_url)
