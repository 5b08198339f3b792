"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Ids are stored as signed 64-bit integers
MAX_ID = 2**63 - 1


@dataclass
class Article:
    """Core domain entity representing an article with its denormalized like counter."""

    author_id: int
    title: str
    body: str
    like_count: int = 0
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, title: str | None = None, body: str | None = None) -> None:
        """Update editable fields and refresh the updated_at timestamp.

        author_id and like_count are never changed here; the counter is owned
        by the like service.
        """
        if title is not None:
            self.title = title
        if body is not None:
            self.body = body
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class ArticlePage:
    """One page of articles plus the offset at which the next page starts."""

    items: list[Article]
    next_offset: int
