"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from article_likes.application.services import ArticleService, LikeService
from article_likes.config import Settings
from article_likes.infrastructure.database.session import get_db_session
from article_likes.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyLikeRepository,
)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_like_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LikeService, None]:
    """Provides a LikeService bound to this request's session."""
    repository = SQLAlchemyLikeRepository(session)
    yield LikeService(repository)
