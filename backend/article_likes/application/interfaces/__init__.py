from .article_repository import ArticleRepository
from .like_repository import LikeRepository

__all__ = [
    "ArticleRepository",
    "LikeRepository",
]
