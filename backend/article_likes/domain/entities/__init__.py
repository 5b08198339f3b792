from .article import MAX_ID, Article, ArticlePage
from .like import Like
from .pagination import PageRequest, SortMode

__all__ = [
    "MAX_ID",
    "Article",
    "ArticlePage",
    "Like",
    "PageRequest",
    "SortMode",
]
