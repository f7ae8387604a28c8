"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from learninghub.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations must enforce slug uniqueness and raise
    DuplicateEntityError instead of overwriting another article.
    """

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, newest first."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None:
        """Retrieve a single article by its current slug."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Persist every field of an existing article in one write."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
