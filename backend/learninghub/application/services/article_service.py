"""Application service (use case) for Article operations."""

import logging

from learninghub.application.interfaces import ArticleRepository
from learninghub.application.schemas import ArticleCreate, ArticleUpdate
from learninghub.application.services.article_pipeline import ArticleWritePipeline
from learninghub.domain.entities import AdminPrincipal, Article
from learninghub.domain.entities.article import DEFAULT_COLOR
from learninghub.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Creates and updates run the write pipeline before committing; the
    repository remains the final authority on slug uniqueness.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        pipeline: ArticleWritePipeline | None = None,
        default_color: str = DEFAULT_COLOR,
    ):
        self._repository = repository
        self._pipeline = pipeline or ArticleWritePipeline()
        self._default_color = default_color

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def get_article(self, article_id: str) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_article_by_slug(self, slug: str) -> Article:
        article = await self._repository.get_by_slug(slug)
        if article is None:
            raise EntityNotFoundError("Article", slug, field="slug")
        return article

    async def create_article(self, data: ArticleCreate, principal: AdminPrincipal) -> Article:
        fields = data.to_fields()
        if fields.get("color") is None:
            fields["color"] = self._default_color
        article = Article(**fields, created_by=principal.admin_id)

        self._pipeline.prepare_new(article)
        await self._ensure_slug_available(article)
        created = await self._repository.create(article)
        logger.info(
            "Article created: id=%s slug=%s by=%s", created.id, created.slug, principal.admin_id
        )
        return created

    async def update_article(
        self, article_id: str, data: ArticleUpdate, principal: AdminPrincipal
    ) -> Article:
        article = await self.get_article(article_id)
        changes = data.to_changes()
        if "color" in changes and changes["color"] is None:
            changes["color"] = self._default_color
        changed = article.apply_changes(**changes)

        if not changed:
            logger.debug("Article %s unchanged, nothing to write", article_id)
            return article

        previous_slug = article.slug
        self._pipeline.prepare_update(article, changed)
        if article.slug != previous_slug:
            await self._ensure_slug_available(article)
        updated = await self._repository.update(article)
        logger.info(
            "Article updated: id=%s slug=%s fields=%s by=%s",
            updated.id,
            updated.slug,
            ",".join(sorted(changed)),
            principal.admin_id,
        )
        return updated

    async def delete_article(self, article_id: str, principal: AdminPrincipal) -> bool:
        exists = await self._repository.get_by_id(article_id)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        deleted = await self._repository.delete(article_id)
        logger.info("Article deleted: id=%s by=%s", article_id, principal.admin_id)
        return deleted

    async def _ensure_slug_available(self, article: Article) -> None:
        owner = await self._repository.get_by_slug(article.slug)
        if owner is not None and owner.id != article.id:
            raise DuplicateEntityError("Article", "slug", article.slug)
