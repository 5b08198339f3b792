"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

The wire format is camelCase (``authorId``, ``likeCount`` ...); snake_case
names are accepted on input as well.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from article_likes.domain.entities import MAX_ID


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ArticleCreate(_CamelModel):
    """Schema for creating a new article."""

    author_id: int = Field(..., gt=0, le=MAX_ID, examples=[42])
    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    body: str = Field(..., min_length=1, examples=["This is the article body."])


class ArticleUpdate(_CamelModel):
    """Schema for replacing the editable fields of an article — both required."""

    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)


class ArticleCreated(_CamelModel):
    id: int


class ArticleResponse(_CamelModel):
    """Schema returned to the client."""

    id: int
    author_id: int
    title: str
    body: str
    like_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ArticleListResponse(_CamelModel):
    items: list[ArticleResponse]
    next_offset: int
