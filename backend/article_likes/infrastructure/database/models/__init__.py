from .article import ArticleModel
from .like import LikeModel

__all__ = [
    "ArticleModel",
    "LikeModel",
]
