"""Like relation table."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from models.base_table import StoreTable


class LikeTable(StoreTable):
    """Sets of liker identities keyed by post id.

    A like-set is created lazily by the first like of a post and survives
    (possibly empty) after its last unlike.

    Args:
        table_name: Always "likes".
        likes: Mapping from post id to the identities that liked it.
    """

    table_name: str = Field(default="likes", frozen=True)
    likes: dict[int, set[str]] = Field(default_factory=dict)

    def has_like_set(self, post_id: int) -> bool:
        return post_id in self.likes

    def is_liked(self, post_id: int, identity: str) -> bool:
        return identity in self.likes.get(post_id, ())

    def add(self, post_id: int, identity: str, timestamp: datetime) -> None:
        self.likes.setdefault(post_id, set()).add(identity)
        self.touch(timestamp)

    def remove(self, post_id: int, identity: str, timestamp: datetime) -> None:
        self.likes[post_id].discard(identity)
        self.touch(timestamp)

    def drop_post(self, post_id: int, timestamp: datetime) -> set[str]:
        """Forget the like-set of a deleted post and return its members."""
        likers = self.likes.pop(post_id, set())
        if likers:
            self.touch(timestamp)
        return likers

    def count(self, post_id: int) -> int:
        return len(self.likes.get(post_id, ()))

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "likes": {str(post_id): sorted(likers) for post_id, likers in self.likes.items()},
            "like_count": sum(len(likers) for likers in self.likes.values()),
        }

    def validate_state(self) -> list[str]:
        return []

    def clear(self) -> None:
        self.likes.clear()
        self.update_count = 0

    @property
    def summary(self) -> str:
        total = sum(len(likers) for likers in self.likes.values())
        return f"{total} likes across {len(self.likes)} posts"
