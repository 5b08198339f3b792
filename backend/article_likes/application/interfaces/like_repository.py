"""Port for like persistence and the denormalized like counter."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from article_likes.domain.entities import Like


class LikeRepository(ABC):
    """All mutating calls must run inside ``transaction()`` to commit together."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a unit of work: commit on normal exit, roll back on error.

        Database failures surface as ``StorageError``.
        """
        ...

    @abstractmethod
    async def article_exists(self, article_id: int) -> bool:
        ...

    @abstractmethod
    async def insert_if_absent(self, like: Like) -> bool:
        """Atomically insert the like. Returns True only if a new row was written."""
        ...

    @abstractmethod
    async def delete_if_present(self, like: Like) -> bool:
        """Atomically delete the like. Returns True only if a row was removed."""
        ...

    @abstractmethod
    async def adjust_like_count(self, article_id: int, delta: int) -> None:
        """Add ``delta`` to the article's like_count, never going below zero."""
        ...
