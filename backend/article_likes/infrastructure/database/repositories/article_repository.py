"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from article_likes.application.interfaces import ArticleRepository
from article_likes.domain.entities import Article, PageRequest, SortMode
from article_likes.infrastructure.database.models import ArticleModel, LikeModel

_ORDERINGS = {
    SortMode.NEW: (ArticleModel.created_at.desc(), ArticleModel.id.desc()),
    SortMode.POPULAR: (ArticleModel.like_count.desc(), ArticleModel.id.desc()),
}


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            body=model.body,
            like_count=model.like_count,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            author_id=entity.author_id,
            title=entity.title,
            body=entity.body,
            like_count=0,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_page(self, page: PageRequest) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .order_by(*_ORDERINGS[page.sort])
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.body = article.body
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        # Likes go in the same transaction; the FK cascade is not enforced on every backend
        await self._session.execute(
            delete(LikeModel.__table__).where(LikeModel.article_id == article_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        return True


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; every stored timestamp is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
