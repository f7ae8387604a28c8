"""In-process ArticleGateway over ArticleService, for server-rendered pages."""

from typing import Any

from learninghub.application.interfaces import ArticleGateway, Credentials
from learninghub.application.schemas import ArticleCreate, ArticleResponse, ArticleUpdate
from learninghub.application.services import ArticleService
from learninghub.domain.entities import AdminPrincipal, Article


def _to_wire(article: Article) -> dict[str, Any]:
    return ArticleResponse.model_validate(article, from_attributes=True).model_dump(
        mode="json", by_alias=True
    )


class ServiceArticleGateway(ArticleGateway):
    """Serves views from the local service instead of the HTTP API.

    ``principal_resolver`` turns Credentials into an AdminPrincipal for
    writes; without it the gateway is read-only.
    """

    def __init__(self, service: ArticleService, principal_resolver=None):
        self._service = service
        self._resolve_principal = principal_resolver

    def _principal(self, credentials: Credentials) -> AdminPrincipal:
        if self._resolve_principal is None:
            raise PermissionError("This gateway does not accept writes")
        return self._resolve_principal(credentials)

    async def list_articles(self, credentials: Credentials | None = None) -> list[dict[str, Any]]:
        return [_to_wire(a) for a in await self._service.list_articles()]

    async def get_article_by_slug(
        self, slug: str, credentials: Credentials | None = None
    ) -> dict[str, Any]:
        return _to_wire(await self._service.get_article_by_slug(slug))

    async def get_article(
        self, article_id: str, credentials: Credentials | None = None
    ) -> dict[str, Any]:
        return _to_wire(await self._service.get_article(article_id))

    async def create_article(
        self, fields: dict[str, Any], credentials: Credentials
    ) -> dict[str, Any]:
        article = await self._service.create_article(
            ArticleCreate.model_validate(fields), self._principal(credentials)
        )
        return _to_wire(article)

    async def update_article(
        self, article_id: str, fields: dict[str, Any], credentials: Credentials
    ) -> dict[str, Any]:
        article = await self._service.update_article(
            article_id, ArticleUpdate.model_validate(fields), self._principal(credentials)
        )
        return _to_wire(article)

    async def delete_article(self, article_id: str, credentials: Credentials) -> None:
        await self._service.delete_article(article_id, self._principal(credentials))
