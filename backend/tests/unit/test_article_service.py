"""Unit tests for the ArticleService."""

from datetime import datetime, timedelta, timezone

import pytest

from article_likes.application.interfaces import ArticleRepository
from article_likes.application.schemas import ArticleCreate, ArticleUpdate
from article_likes.application.services import ArticleService
from article_likes.domain.entities import Article, PageRequest, SortMode
from article_likes.domain.exceptions import EntityNotFoundError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    async def get_page(self, page: PageRequest) -> list[Article]:
        if page.sort is SortMode.POPULAR:
            key = lambda a: (a.like_count, a.id)  # noqa: E731
        else:
            key = lambda a: (a.created_at, a.id)  # noqa: E731
        articles = sorted(self._articles.values(), key=key, reverse=True)
        return articles[page.offset : page.offset + page.limit]

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False


@pytest.fixture
def service() -> ArticleService:
    return ArticleService(FakeArticleRepository())


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    data = ArticleCreate(authorId=7, title="Test Article", body="Some body")
    article = await service.create_article(data)
    assert article.id is not None
    assert article.author_id == 7
    assert article.title == "Test Article"
    assert article.like_count == 0


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_list_articles_reports_next_offset(service: ArticleService):
    for i in range(3):
        await service.create_article(ArticleCreate(authorId=1, title=f"A{i}", body="B"))

    page = await service.list_articles(PageRequest(limit=2, offset=0))
    assert len(page.items) == 2
    assert page.next_offset == 2

    page = await service.list_articles(PageRequest(limit=2, offset=2))
    assert len(page.items) == 1
    assert page.next_offset == 3


@pytest.mark.asyncio
async def test_update_article_refreshes_updated_at(service: ArticleService):
    created = await service.create_article(ArticleCreate(authorId=3, title="Old", body="Old body"))
    created.updated_at = datetime.now(timezone.utc) - timedelta(hours=1)
    before = created.updated_at

    updated = await service.update_article(created.id, ArticleUpdate(title="New", body="New body"))
    assert updated.title == "New"
    assert updated.body == "New body"
    assert updated.author_id == 3
    assert updated.updated_at > before


@pytest.mark.asyncio
async def test_update_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, ArticleUpdate(title="T", body="B"))


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(ArticleCreate(authorId=1, title="Delete Me", body="..."))
    await service.delete_article(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id)


@pytest.mark.asyncio
async def test_delete_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(5)
