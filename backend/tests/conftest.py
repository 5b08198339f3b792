"""Shared fixtures: a throwaway SQLite database and an app wired to it."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from article_likes.config import Settings
from article_likes.infrastructure.database import Database
from article_likes.infrastructure.database.models import LikeModel
from article_likes.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        database_url=f"sqlite:///{tmp_path / 'articles.db'}",
        db_timeout_seconds=30,
    )


@pytest_asyncio.fixture
async def database(settings: Settings):
    db = Database.from_settings(settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(settings: Settings, database: Database):
    # ASGITransport does not run the lifespan, so attach the database directly
    application = create_app(settings)
    application.state.database = database
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def like_rows(database: Database):
    """Count like rows for an article, optionally narrowed to one user."""

    async def count(article_id: int, user_id: int | None = None) -> int:
        stmt = select(func.count()).select_from(LikeModel).where(LikeModel.article_id == article_id)
        if user_id is not None:
            stmt = stmt.where(LikeModel.user_id == user_id)
        async with database.session() as session:
            return (await session.execute(stmt)).scalar_one()

    return count
