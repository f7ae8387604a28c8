"""Public list of programming-language articles."""

import logging
from dataclasses import dataclass
from typing import Any

from learninghub.application.interfaces import ArticleGateway
from learninghub.presentation.views.common import Notifier, ViewState, theme_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArticleTile:
    """One card on the list page. ``key`` is the article id, never the slug."""

    key: str
    title: str
    description: str
    href: str
    gradient: str
    icon: str | None
    initial: str

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "ArticleTile":
        title = data.get("title") or ""
        return cls(
            key=data["id"],
            title=title,
            description=data.get("description") or "",
            href=f"/languages/{data['slug']}",
            gradient=theme_for(data.get("color")),
            icon=data.get("icon") or None,
            initial=title[:1],
        )


class ArticleListView:
    """Loads every article and turns it into tiles."""

    def __init__(self, gateway: ArticleGateway, notifier: Notifier):
        self._gateway = gateway
        self._notifier = notifier
        self.state = ViewState.LOADING
        self.tiles: list[ArticleTile] = []

    @property
    def is_empty(self) -> bool:
        return self.state is not ViewState.LOADING and not self.tiles

    async def load(self) -> None:
        self.state = ViewState.LOADING
        try:
            data = await self._gateway.list_articles()
        except Exception:
            logger.exception("Failed to fetch articles")
            self._notifier.error(
                "Failed to load programming languages. Please try again later."
            )
            self.tiles = []
            self.state = ViewState.FAILED
            return

        self.tiles = [ArticleTile.from_wire(item) for item in data]
        self.state = ViewState.READY
