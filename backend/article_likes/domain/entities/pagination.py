"""Pagination value objects for article listings."""

from dataclasses import dataclass
from enum import Enum

from .article import MAX_ID


class SortMode(str, Enum):
    """Ordering of an article listing. Ties are always broken by id descending."""

    NEW = "new"
    POPULAR = "popular"

    @classmethod
    def parse(cls, raw: str | None) -> "SortMode":
        """Only the exact value "popular" selects POPULAR; anything else is NEW."""
        return cls.POPULAR if raw == cls.POPULAR.value else cls.NEW


@dataclass(frozen=True)
class PageRequest:
    limit: int
    offset: int
    sort: SortMode = SortMode.NEW

    @classmethod
    def from_query(
        cls,
        limit: str | None,
        offset: str | None,
        sort: str | None,
        *,
        default_limit: int = 20,
        max_limit: int = 100,
    ) -> "PageRequest":
        """Build a page request from raw query-string values.

        Parsing is lenient: a limit that is missing, not an integer, not
        positive or above ``max_limit`` becomes ``default_limit``; an offset
        that is missing, not an integer or negative becomes 0.
        """
        parsed_limit = _to_int(limit, 0)
        if parsed_limit <= 0 or parsed_limit > max_limit:
            parsed_limit = default_limit
        parsed_offset = max(_to_int(offset, 0), 0)
        return cls(limit=parsed_limit, offset=parsed_offset, sort=SortMode.parse(sort))


def _to_int(raw: str | None, fallback: int) -> int:
    if raw is None:
        return fallback
    try:
        value = int(raw.strip())
    except ValueError:
        return fallback
    # Anything that does not fit a signed 64-bit integer is treated as malformed
    return value if -MAX_ID - 1 <= value <= MAX_ID else fallback
