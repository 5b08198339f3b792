from .article_service import ArticleService
from .like_service import LikeService

__all__ = [
    "ArticleService",
    "LikeService",
]
