"""Like-toggle use case.

Keeps ``Article.like_count`` equal to the number of like rows for the
article. Each call is one transaction combining a conditional insert/delete
keyed by (user_id, article_id) with a counter adjustment that is applied only
when the row mutation reported an affected row. Duplicate concurrent likes
are rejected by the storage uniqueness constraint, not by locks here.

State per (user, article) pair::

    NOT_LIKED --like-->   LIKED      (counter +1)
    LIKED     --like-->   LIKED      (no-op)
    LIKED     --unlike--> NOT_LIKED  (counter -1, floored at 0)
    NOT_LIKED --unlike--> NOT_LIKED  (no-op)
"""

import logging

from article_likes.application.interfaces import LikeRepository
from article_likes.domain.entities import MAX_ID, Like
from article_likes.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class LikeService:
    """Idempotent like/unlike toggles. Depends on the like repository port (DI)."""

    def __init__(self, repository: LikeRepository):
        self._repository = repository

    async def like(self, user_id: int, article_id: int) -> bool:
        """Record that ``user_id`` likes ``article_id``.

        Returns True if the like was newly created, False if it already existed.

        Raises:
            ValidationError: an id is not a positive integer.
            EntityNotFoundError: the article does not exist.
            StorageError: the transaction failed; nothing was applied.
        """
        like = _build_like(user_id, article_id)
        async with self._repository.transaction():
            if not await self._repository.article_exists(article_id):
                raise EntityNotFoundError("Article", article_id)
            created = await self._repository.insert_if_absent(like)
            if created:
                await self._repository.adjust_like_count(article_id, 1)

        logger.debug(
            "like user=%d article=%d -> %s", user_id, article_id,
            "LIKED" if created else "already LIKED",
        )
        return created

    async def unlike(self, user_id: int, article_id: int) -> bool:
        """Remove the like of ``user_id`` on ``article_id`` if present.

        Returns True if a like was removed, False if there was none.
        """
        like = _build_like(user_id, article_id)
        async with self._repository.transaction():
            removed = await self._repository.delete_if_present(like)
            if removed:
                await self._repository.adjust_like_count(article_id, -1)

        logger.debug(
            "unlike user=%d article=%d -> %s", user_id, article_id,
            "NOT_LIKED" if removed else "already NOT_LIKED",
        )
        return removed


def _build_like(user_id: int, article_id: int) -> Like:
    if not 0 < user_id <= MAX_ID:
        raise ValidationError("userId", "must be a positive 64-bit integer")
    if not 0 < article_id <= MAX_ID:
        raise ValidationError("id", "must be a positive 64-bit integer")
    return Like(user_id=user_id, article_id=article_id)
