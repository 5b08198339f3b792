from .base import Base
from .session import Database, get_db_session
from .models import ArticleModel, LikeModel

__all__ = [
    "Base",
    "Database",
    "get_db_session",
    "ArticleModel",
    "LikeModel",
]
