from .article_repository import SQLAlchemyArticleRepository
from .like_repository import SQLAlchemyLikeRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyLikeRepository",
]
