"""Article write pipeline: validate, derive slug, stamp timestamps.

The repository commit is the final stage and is invoked by ArticleService
right after ``prepare_new`` / ``prepare_update``. Slug and timestamp are set
on the same record that gets written, so they reach storage together.
"""

import logging
from collections.abc import Callable, Collection
from datetime import datetime, timezone

from learninghub.domain.entities import Article
from learninghub.domain.slug import SlugDeriver

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_stage(article: Article) -> None:
    """Reject records with missing required fields. Never auto-corrects."""
    article.validate()


def slug_stage(article: Article, changed: Collection[str], deriver: SlugDeriver) -> bool:
    """Re-derive the slug when the title changed. Returns True if it ran."""
    if "title" not in changed and article.slug is not None:
        return False
    article.slug = deriver.derive(article.title)
    return True


def timestamp_stage(article: Article, changed: Collection[str], now: datetime) -> bool:
    """Advance updated_at when anything changed, never behind created_at."""
    if not changed:
        return False
    article.updated_at = max(now, article.created_at)
    return True


class ArticleWritePipeline:
    """Runs the pre-commit stages for article creates and updates."""

    def __init__(self, slug_deriver: SlugDeriver | None = None, clock: Clock | None = None):
        self._deriver = slug_deriver or SlugDeriver()
        self._clock = clock or _utcnow

    def prepare_new(self, article: Article) -> Article:
        validate_stage(article)
        slug_stage(article, {"title"}, self._deriver)
        now = self._clock()
        article.created_at = now
        article.updated_at = now
        logger.debug("Prepared new article: slug=%s", article.slug)
        return article

    def prepare_update(self, article: Article, changed: Collection[str]) -> Article:
        validate_stage(article)
        slug_changed = slug_stage(article, changed, self._deriver)
        timestamp_stage(article, changed, self._clock())
        logger.debug(
            "Prepared article update: id=%s changed=%s slug=%s%s",
            article.id,
            sorted(changed),
            article.slug,
            " (re-derived)" if slug_changed else "",
        )
        return article
