from .article import (
    ArticleCreate,
    ArticleCreated,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
)

__all__ = [
    "ArticleCreate",
    "ArticleCreated",
    "ArticleListResponse",
    "ArticleResponse",
    "ArticleUpdate",
]
