"""Like fact record — existence-only, keyed by (user_id, article_id)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Like:
    user_id: int
    article_id: int
