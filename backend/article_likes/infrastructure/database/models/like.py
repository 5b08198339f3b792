"""SQLAlchemy ORM model for the Like fact table."""

from sqlalchemy import BigInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from article_likes.infrastructure.database.base import Base
from article_likes.infrastructure.database.models.article import IdType


class LikeModel(Base):
    """ORM model — maps to the 'likes' table, one row per (user, article)."""

    __tablename__ = "likes"

    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    article_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("articles.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<LikeModel(user_id={self.user_id}, article_id={self.article_id})>"
