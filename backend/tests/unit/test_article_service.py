"""Unit tests for the ArticleService."""

import copy
from datetime import datetime, timedelta, timezone

import pytest

from learninghub.application.interfaces import ArticleRepository
from learninghub.application.schemas import ArticleCreate, ArticleUpdate
from learninghub.application.services import ArticleService, ArticleWritePipeline
from learninghub.domain.entities import AdminPrincipal, Article, Library
from learninghub.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
)
from learninghub.domain.slug import SlugDeriver

ADMIN = AdminPrincipal(admin_id="admin-1")


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing. Stores copies, like a real store."""

    def __init__(self):
        self._articles: dict[str, Article] = {}
        self.writes = 0

    async def get_all(self) -> list[Article]:
        articles = sorted(self._articles.values(), key=lambda a: a.created_at, reverse=True)
        return [copy.deepcopy(a) for a in articles]

    async def get_by_id(self, article_id: str) -> Article | None:
        article = self._articles.get(article_id)
        return copy.deepcopy(article) if article else None

    async def get_by_slug(self, slug: str) -> Article | None:
        for article in self._articles.values():
            if article.slug == slug:
                return copy.deepcopy(article)
        return None

    def _check_unique(self, article: Article) -> None:
        for other in self._articles.values():
            if other.slug == article.slug and other.id != article.id:
                raise DuplicateEntityError("Article", "slug", article.slug)

    async def create(self, article: Article) -> Article:
        self._check_unique(article)
        self._articles[article.id] = copy.deepcopy(article)
        self.writes += 1
        return copy.deepcopy(article)

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._check_unique(article)
        self._articles[article.id] = copy.deepcopy(article)
        self.writes += 1
        return copy.deepcopy(article)

    async def delete(self, article_id: str) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False


class StepClock:
    """Advances one second per call."""

    def __init__(self):
        self._now = datetime(2026, 3, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    pipeline = ArticleWritePipeline(SlugDeriver(), clock=StepClock())
    return ArticleService(repository, pipeline=pipeline)


def _create(title: str = "Python", **overrides) -> ArticleCreate:
    fields = dict(
        title=title,
        description="A language",
        content="Line one\nLine two",
        language=title.lower(),
    )
    fields.update(overrides)
    return ArticleCreate(**fields)


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    article = await service.create_article(_create("Go Lang"), ADMIN)
    assert article.id is not None
    assert article.slug == "go-lang"
    assert article.created_by == "admin-1"
    assert article.color == "blue"
    assert article.updated_at == article.created_at


@pytest.mark.asyncio
async def test_create_article_with_libraries(service: ArticleService):
    data = ArticleCreate.model_validate({
        "title": "Python",
        "description": "d",
        "content": "c",
        "language": "python",
        "useCases": ["Web", "Data"],
        "libraries": [{"name": "NumPy", "description": "Arrays", "url": "https://numpy.org"}],
    })
    article = await service.create_article(data, ADMIN)
    assert article.use_cases == ["Web", "Data"]
    assert article.libraries == [Library(name="NumPy", description="Arrays", url="https://numpy.org")]


@pytest.mark.asyncio
async def test_create_uses_special_case_slug(service: ArticleService):
    assert (await service.create_article(_create("C++"), ADMIN)).slug == "cpp"
    assert (await service.create_article(_create("C#"), ADMIN)).slug == "csharp"


@pytest.mark.asyncio
async def test_create_rejects_blank_required_field(service: ArticleService, repository):
    with pytest.raises(EntityValidationError):
        await service.create_article(_create(description="   "), ADMIN)
    assert repository.writes == 0


@pytest.mark.asyncio
async def test_duplicate_slug_on_create_conflicts(service: ArticleService):
    await service.create_article(_create("Go Lang"), ADMIN)
    with pytest.raises(DuplicateEntityError) as exc_info:
        await service.create_article(_create("GO   LANG"), ADMIN)
    assert exc_info.value.value == "go-lang"
    assert len(await service.list_articles()) == 1


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article("missing")


@pytest.mark.asyncio
async def test_get_by_slug_not_found_is_an_error(service: ArticleService):
    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.get_article_by_slug("nope")
    assert exc_info.value.field == "slug"


@pytest.mark.asyncio
async def test_get_by_slug(service: ArticleService):
    created = await service.create_article(_create("Rust"), ADMIN)
    found = await service.get_article_by_slug("rust")
    assert found.id == created.id


@pytest.mark.asyncio
async def test_list_articles(service: ArticleService):
    await service.create_article(_create("A1"), ADMIN)
    await service.create_article(_create("A2"), ADMIN)
    articles = await service.list_articles()
    assert [a.title for a in articles] == ["A2", "A1"]


@pytest.mark.asyncio
async def test_update_description_keeps_slug_and_advances_updated_at(service: ArticleService):
    created = await service.create_article(_create("Go Lang"), ADMIN)
    updated = await service.update_article(created.id, ArticleUpdate(description="New"), ADMIN)
    assert updated.slug == "go-lang"
    assert updated.description == "New"
    assert updated.updated_at > created.updated_at
    assert updated.created_at == created.created_at


@pytest.mark.asyncio
async def test_update_title_changes_slug(service: ArticleService):
    created = await service.create_article(_create("Old Name"), ADMIN)
    updated = await service.update_article(created.id, ArticleUpdate(title="New Name"), ADMIN)
    assert updated.slug == "new-name"
    assert updated.updated_at > created.updated_at
    with pytest.raises(EntityNotFoundError):
        await service.get_article_by_slug("old-name")


@pytest.mark.asyncio
async def test_update_without_changes_writes_nothing(service: ArticleService, repository):
    created = await service.create_article(_create("Go"), ADMIN)
    writes = repository.writes
    same = await service.update_article(created.id, ArticleUpdate(title="Go"), ADMIN)
    assert repository.writes == writes
    assert same.updated_at == created.updated_at


@pytest.mark.asyncio
async def test_update_title_into_existing_slug_conflicts(service: ArticleService):
    await service.create_article(_create("Go"), ADMIN)
    other = await service.create_article(_create("Rust"), ADMIN)
    with pytest.raises(DuplicateEntityError):
        await service.update_article(other.id, ArticleUpdate(title="go"), ADMIN)
    assert (await service.get_article(other.id)).slug == "rust"


@pytest.mark.asyncio
async def test_update_explicit_null_required_field_is_rejected(service: ArticleService):
    created = await service.create_article(_create("Go"), ADMIN)
    with pytest.raises(EntityValidationError):
        await service.update_article(
            created.id, ArticleUpdate.model_validate({"content": None}), ADMIN
        )


@pytest.mark.asyncio
async def test_update_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article("missing", ArticleUpdate(title="x"), ADMIN)


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(_create("Delete Me"), ADMIN)
    result = await service.delete_article(created.id, ADMIN)
    assert result is True
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id)


@pytest.mark.asyncio
async def test_delete_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article("missing", ADMIN)


@pytest.mark.asyncio
async def test_default_color_is_configurable(repository: FakeArticleRepository):
    service = ArticleService(repository, default_color="teal")
    article = await service.create_article(_create("Elixir"), ADMIN)
    assert article.color == "teal"
