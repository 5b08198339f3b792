"""SQLAlchemy implementation of the LikeRepository.

Row mutations are single statements whose affected-row count tells the
caller whether state changed: ``INSERT ... ON CONFLICT DO NOTHING`` against
the (user_id, article_id) primary key, and a keyed ``DELETE``.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import case, delete, exists as sql_exists, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from article_likes.application.interfaces import LikeRepository
from article_likes.domain.entities import Like
from article_likes.domain.exceptions import EntityNotFoundError, StorageError
from article_likes.infrastructure.database.models import ArticleModel, LikeModel

logger = logging.getLogger(__name__)

_likes = LikeModel.__table__
_articles = ArticleModel.__table__

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLAlchemyLikeRepository(LikeRepository):
    """Like persistence on an AsyncSession; one transaction per ``transaction()`` block."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._session.in_transaction():
            scope = self._session.begin_nested()
        else:
            scope = self._session.begin()
        try:
            async with scope:
                yield
        except SQLAlchemyError as exc:
            logger.error("Like transaction rolled back: %s", exc)
            raise StorageError("like transaction", exc) from exc

    async def article_exists(self, article_id: int) -> bool:
        stmt = select(sql_exists().where(_articles.c.id == article_id))
        return bool((await self._session.execute(stmt)).scalar())

    async def insert_if_absent(self, like: Like) -> bool:
        dialect = self._session.get_bind().dialect.name
        try:
            insert = _INSERT_BY_DIALECT[dialect]
        except KeyError:
            raise StorageError(f"like insert on unsupported dialect '{dialect}'") from None

        stmt = (
            insert(_likes)
            .values(user_id=like.user_id, article_id=like.article_id)
            .on_conflict_do_nothing(index_elements=["user_id", "article_id"])
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            # Only the article FK can fail here; the PK conflict is swallowed by DO NOTHING
            raise EntityNotFoundError("Article", like.article_id) from exc
        return result.rowcount == 1

    async def delete_if_present(self, like: Like) -> bool:
        stmt = delete(_likes).where(
            _likes.c.user_id == like.user_id,
            _likes.c.article_id == like.article_id,
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def adjust_like_count(self, article_id: int, delta: int) -> None:
        adjusted = _articles.c.like_count + delta
        stmt = (
            update(_articles)
            .where(_articles.c.id == article_id)
            .values(like_count=case((adjusted > 0, adjusted), else_=0))
        )
        await self._session.execute(stmt)
