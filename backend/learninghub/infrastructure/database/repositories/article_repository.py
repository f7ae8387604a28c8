"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from dataclasses import asdict

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from learninghub.application.interfaces import ArticleRepository
from learninghub.domain.entities import Article, Library
from learninghub.domain.exceptions import DuplicateEntityError
from learninghub.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Slug uniqueness is enforced by the table's UNIQUE constraint; a violation
    rolls the session back and surfaces as DuplicateEntityError.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            slug=model.slug,
            description=model.description,
            content=model.content,
            language=model.language,
            requirements=list(model.requirements or []),
            use_cases=list(model.use_cases or []),
            libraries=[Library(**item) for item in model.libraries or []],
            icon=model.icon,
            color=model.color,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        model = ArticleModel(id=entity.id, created_by=entity.created_by)
        self._copy_fields(entity, model)
        model.created_at = entity.created_at
        return model

    @staticmethod
    def _copy_fields(entity: Article, model: ArticleModel) -> None:
        model.title = entity.title
        model.slug = entity.slug
        model.description = entity.description
        model.content = entity.content
        model.language = entity.language
        model.requirements = list(entity.requirements)
        model.use_cases = list(entity.use_cases)
        model.libraries = [asdict(lib) for lib in entity.libraries]
        model.icon = entity.icon
        model.color = entity.color
        model.updated_at = entity.updated_at

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, article_id: str) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._flush_or_conflict(article)
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        self._copy_fields(article, model)
        await self._flush_or_conflict(article)
        return self._to_entity(model)

    async def delete(self, article_id: str) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _flush_or_conflict(self, article: Article) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.warning("Slug conflict on write: slug=%s (%s)", article.slug, exc.orig)
            raise DuplicateEntityError("Article", "slug", article.slug or "") from exc
