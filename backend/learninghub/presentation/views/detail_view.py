"""Public detail page for a single article, addressed by slug."""

import logging
from dataclasses import dataclass, field
from typing import Any

from learninghub.application.interfaces import ArticleGateway
from learninghub.domain.exceptions import EntityNotFoundError
from learninghub.presentation.views.common import Notifier, ViewState

logger = logging.getLogger(__name__)

BACK_LINK = "/languages"


@dataclass(frozen=True)
class LibraryCard:
    name: str
    description: str
    url: str | None = None


@dataclass
class ArticleDetail:
    id: str
    title: str
    description: str
    content: str
    color: str
    icon: str | None = None
    requirements: list[str] = field(default_factory=list)
    use_cases: list[str] = field(default_factory=list)
    libraries: list[LibraryCard] = field(default_factory=list)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "ArticleDetail":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description") or "",
            content=data.get("content") or "",
            color=data.get("color") or "blue",
            icon=data.get("icon") or None,
            requirements=list(data.get("requirements") or []),
            use_cases=list(data.get("useCases") or []),
            libraries=[
                LibraryCard(
                    name=lib.get("name", ""),
                    description=lib.get("description", ""),
                    url=lib.get("url") or None,
                )
                for lib in data.get("libraries") or []
            ],
        )

    @property
    def rendered_content(self) -> str:
        """Content as markup with newlines turned into line breaks.

        Not sanitised: content is trusted admin input. Anything that lets
        untrusted users write content must add sanitisation here.
        """
        return self.content.replace("\n", "<br />")

    @property
    def header_class(self) -> str:
        return f"bg-{self.color}-100"

    @property
    def show_requirements(self) -> bool:
        return len(self.requirements) > 0

    @property
    def show_use_cases(self) -> bool:
        return len(self.use_cases) > 0

    @property
    def show_libraries(self) -> bool:
        return len(self.libraries) > 0


class ArticleDetailView:
    """Fetches one article by slug.

    NOT_FOUND is terminal: once reached, ``load()`` never asks the gateway
    again. A transport failure leaves the view FAILED until the caller
    re-triggers it with ``load(force=True)``.
    """

    back_link = BACK_LINK

    def __init__(self, slug: str, gateway: ArticleGateway, notifier: Notifier):
        self.slug = slug
        self._gateway = gateway
        self._notifier = notifier
        self.state = ViewState.LOADING
        self.article: ArticleDetail | None = None

    async def load(self, force: bool = False) -> None:
        if self.state is ViewState.NOT_FOUND:
            return
        if self.state is not ViewState.LOADING and not force:
            return

        self.state = ViewState.LOADING
        try:
            data = await self._gateway.get_article_by_slug(self.slug)
        except EntityNotFoundError:
            logger.info("Article not found: slug=%s", self.slug)
            self.article = None
            self.state = ViewState.NOT_FOUND
            return
        except Exception:
            logger.exception("Error fetching article: slug=%s", self.slug)
            self._notifier.error("Failed to load the article. Please try again later.")
            self.article = None
            self.state = ViewState.FAILED
            return

        self.article = ArticleDetail.from_wire(data)
        self.state = ViewState.READY
