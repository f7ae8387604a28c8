"""Unit tests for the article write pipeline stages."""

from datetime import datetime, timedelta, timezone

import pytest

from learninghub.application.services.article_pipeline import (
    ArticleWritePipeline,
    slug_stage,
    timestamp_stage,
)
from learninghub.domain.entities import Article
from learninghub.domain.exceptions import EntityValidationError
from learninghub.domain.slug import SlugDeriver

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(T0)


@pytest.fixture
def pipeline(clock: FakeClock) -> ArticleWritePipeline:
    return ArticleWritePipeline(SlugDeriver(), clock=clock)


def _article(**overrides) -> Article:
    fields = dict(title="Go Lang", description="d", content="c", language="go")
    fields.update(overrides)
    return Article(**fields)


def test_prepare_new_derives_slug_and_stamps(pipeline: ArticleWritePipeline):
    article = pipeline.prepare_new(_article())
    assert article.slug == "go-lang"
    assert article.created_at == T0
    assert article.updated_at == T0


def test_prepare_new_validates_first(pipeline: ArticleWritePipeline):
    article = _article(description="")
    with pytest.raises(EntityValidationError):
        pipeline.prepare_new(article)
    assert article.slug is None


def test_description_change_keeps_slug_and_advances_updated_at(pipeline, clock):
    article = pipeline.prepare_new(_article())
    clock.advance(minutes=5)

    changed = article.apply_changes(description="Updated")
    pipeline.prepare_update(article, changed)

    assert article.slug == "go-lang"
    assert article.updated_at == T0 + timedelta(minutes=5)
    assert article.created_at == T0


def test_title_change_rederives_slug_and_advances_updated_at(pipeline, clock):
    article = pipeline.prepare_new(_article())
    clock.advance(minutes=1)

    changed = article.apply_changes(title="C#")
    pipeline.prepare_update(article, changed)

    assert article.slug == "csharp"
    assert article.updated_at == T0 + timedelta(minutes=1)


def test_no_changes_leaves_timestamps_alone(pipeline, clock):
    article = pipeline.prepare_new(_article())
    clock.advance(hours=1)
    pipeline.prepare_update(article, set())
    assert article.updated_at == T0


def test_updated_at_never_precedes_created_at(pipeline, clock):
    article = pipeline.prepare_new(_article())
    clock.advance(seconds=-30)  # clock skew
    pipeline.prepare_update(article, {"content"})
    assert article.updated_at >= article.created_at


def test_slug_stage_fills_missing_slug_even_without_title_change():
    article = _article()
    assert slug_stage(article, set(), SlugDeriver()) is True
    assert article.slug == "go-lang"


def test_timestamp_stage_reports_whether_it_ran():
    article = _article(created_at=T0, updated_at=T0)
    assert timestamp_stage(article, set(), T0 + timedelta(days=1)) is False
    assert timestamp_stage(article, {"icon"}, T0 + timedelta(days=1)) is True
    assert article.updated_at == T0 + timedelta(days=1)
