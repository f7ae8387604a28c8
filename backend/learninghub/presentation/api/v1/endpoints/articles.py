"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from learninghub.application.schemas import ArticleCreate, ArticleUpdate, ArticleResponse
from learninghub.application.services import ArticleService
from learninghub.domain.entities import AdminPrincipal
from learninghub.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
)
from learninghub.infrastructure.dependencies import get_admin_principal, get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


def _conflict(e: DuplicateEntityError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"message": str(e), "field": e.field, "value": e.value},
    )


def _unprocessable(e: EntityValidationError) -> HTTPException:
    """Same body shape as FastAPI's own request-validation errors."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=[
            {"loc": ["body", *name.split(".")], "msg": reason, "type": "value_error"}
            for name, reason in e.errors.items()
        ],
    )


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article, newest first."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/slug/{slug}", response_model=ArticleResponse)
async def get_article_by_slug(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by its current slug."""
    try:
        article = await service.get_article_by_slug(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    principal: AdminPrincipal = Depends(get_admin_principal),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article. The slug is derived from the title."""
    try:
        article = await service.create_article(data, principal)
    except EntityValidationError as e:
        raise _unprocessable(e)
    except DuplicateEntityError as e:
        raise _conflict(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    principal: AdminPrincipal = Depends(get_admin_principal),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article. Changing the title changes the slug."""
    try:
        article = await service.update_article(article_id, data, principal)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EntityValidationError as e:
        raise _unprocessable(e)
    except DuplicateEntityError as e:
        raise _conflict(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    principal: AdminPrincipal = Depends(get_admin_principal),
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id, principal)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
