"""Application service (use case) for Article operations."""

from article_likes.application.interfaces import ArticleRepository
from article_likes.application.schemas import ArticleCreate, ArticleUpdate
from article_likes.domain.entities import Article, ArticlePage, PageRequest
from article_likes.domain.exceptions import EntityNotFoundError


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, page: PageRequest) -> ArticlePage:
        articles = await self._repository.get_page(page)
        return ArticlePage(items=articles, next_offset=page.offset + len(articles))

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(author_id=data.author_id, title=data.title, body=data.body)
        return await self._repository.create(article)

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        article.update(title=data.title, body=data.body)
        return await self._repository.update(article)

    async def delete_article(self, article_id: int) -> None:
        deleted = await self._repository.delete(article_id)
        if not deleted:
            raise EntityNotFoundError("Article", article_id)
