"""Port used by the presentation views to reach the article API.

Two adapters exist: the httpx client (remote API) and an in-process adapter
over ArticleService (server-rendered pages). Articles cross this boundary
as plain dicts in wire format (camelCase keys).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Credentials:
    """Admin bearer token, handed explicitly to every gateway call."""

    token: str

    def as_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class ArticleGateway(ABC):
    """Six operations the views need; no other methods."""

    @abstractmethod
    async def list_articles(self, credentials: Credentials | None = None) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def get_article_by_slug(
        self, slug: str, credentials: Credentials | None = None
    ) -> dict[str, Any]:
        """Raises EntityNotFoundError when no article has this slug."""
        ...

    @abstractmethod
    async def get_article(
        self, article_id: str, credentials: Credentials | None = None
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    async def create_article(
        self, fields: dict[str, Any], credentials: Credentials
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    async def update_article(
        self, article_id: str, fields: dict[str, Any], credentials: Credentials
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    async def delete_article(self, article_id: str, credentials: Credentials) -> None:
        ...
