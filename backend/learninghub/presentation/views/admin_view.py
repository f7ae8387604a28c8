"""Admin management of articles: list, client-side search, create/update/delete.

After every successful mutation the whole list is fetched again; the view
never patches its local copy.
"""

import logging
from dataclasses import dataclass
from typing import Any

from learninghub.application.interfaces import ArticleGateway, Credentials
from learninghub.infrastructure.client import format_tags
from learninghub.presentation.views.common import Notifier, ViewState

logger = logging.getLogger(__name__)


@dataclass
class DialogState:
    open: bool = False
    editing: bool = False
    current: dict[str, Any] | None = None


def _form_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Normalise form input: tag-like fields may arrive comma-separated."""
    normalised = dict(fields)
    for name in ("requirements", "useCases"):
        if name in normalised:
            normalised[name] = format_tags(normalised[name])
    return normalised


class AdminArticlesView:
    def __init__(self, gateway: ArticleGateway, notifier: Notifier, credentials: Credentials):
        self._gateway = gateway
        self._notifier = notifier
        self._credentials = credentials
        self.state = ViewState.LOADING
        self.articles: list[dict[str, Any]] = []
        self.search_term = ""
        self.dialog = DialogState()

    @property
    def filtered_articles(self) -> list[dict[str, Any]]:
        term = self.search_term.lower()
        return [a for a in self.articles if term in (a.get("title") or "").lower()]

    async def load(self) -> None:
        self.state = ViewState.LOADING
        try:
            self.articles = await self._gateway.list_articles(self._credentials)
        except Exception:
            logger.exception("Error fetching articles")
            self._notifier.error("Failed to load articles")
            self.state = ViewState.FAILED
            return
        self.state = ViewState.READY

    # ── Dialog ──

    def open_create(self) -> None:
        self.dialog = DialogState(open=True, editing=False, current=None)

    def open_edit(self, article: dict[str, Any]) -> None:
        self.dialog = DialogState(open=True, editing=True, current=article)

    def close_dialog(self) -> None:
        self.dialog = DialogState()

    async def submit(self, fields: dict[str, Any]) -> bool:
        """Submit the dialog form as a create or an update."""
        if self.dialog.editing:
            if not self.dialog.current or not self.dialog.current.get("id"):
                return False
            return await self.update(self.dialog.current["id"], fields)
        return await self.create(fields)

    # ── Mutations ──

    async def create(self, fields: dict[str, Any]) -> bool:
        try:
            await self._gateway.create_article(_form_fields(fields), self._credentials)
        except Exception:
            logger.exception("Error creating article")
            self._notifier.error("Failed to create article")
            return False
        self.close_dialog()
        self._notifier.success("Article created successfully")
        await self.load()
        return True

    async def update(self, article_id: str, fields: dict[str, Any]) -> bool:
        try:
            await self._gateway.update_article(
                article_id, _form_fields(fields), self._credentials
            )
        except Exception:
            logger.exception("Error updating article %s", article_id)
            self._notifier.error("Failed to update article")
            return False
        self.close_dialog()
        self._notifier.success("Article updated successfully")
        await self.load()
        return True

    async def delete(self, article_id: str) -> bool:
        try:
            await self._gateway.delete_article(article_id, self._credentials)
        except Exception:
            logger.exception("Error deleting article %s", article_id)
            self._notifier.error("Failed to delete article")
            return False
        self._notifier.success("Article deleted successfully")
        await self.load()
        return True
