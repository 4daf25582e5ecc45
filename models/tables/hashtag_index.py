"""Hashtag index."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from pydantic import Field

from models.base_table import StoreTable
from models.entities import Hashtag

# Below this many hashtags the top list is returned in insertion order
TOP_HASHTAGS_SORT_MIN = 3


def extract_hashtags(tokens: Iterable[str]) -> list[str]:
    """Split ``tokens`` on whitespace and keep the hashtag tokens.

    A hashtag token starts with ``#`` and is longer than one character.
    Everything else is dropped silently. Duplicates keep their first
    position only.

    Args:
        tokens: Raw tag strings (each may hold several space separated words).

    Returns:
        Hashtag tokens in first-seen order.

    Example:
        >>> extract_hashtags(["hi #fun", "#", "#fun #summer"])
        ['#fun', '#summer']
    """
    found: list[str] = []
    for chunk in tokens:
        for token in chunk.split():
            if token.startswith("#") and len(token) > 1 and token not in found:
                found.append(token)
    return found


class HashtagIndex(StoreTable):
    """Hashtag entries keyed by name.

    ``post_ids`` is seeded when a post is created. ``post_count`` moves with
    likes on those posts, so it measures tag popularity by likes rather than
    by how many posts carry the tag.

    Args:
        table_name: Always "hashtags".
        hashtags: Mapping from hashtag name to entry.
    """

    table_name: str = Field(default="hashtags", frozen=True)
    hashtags: dict[str, Hashtag] = Field(default_factory=dict)

    def get(self, name: str) -> Hashtag | None:
        return self.hashtags.get(name)

    def link_post(self, names: Iterable[str], post_id: int, timestamp: datetime) -> None:
        """Associate a newly created post with each of ``names``."""
        for name in names:
            entry = self.hashtags.setdefault(name, Hashtag(name=name))
            if post_id not in entry.post_ids:
                entry.post_ids.append(post_id)
        self.touch(timestamp)

    def unlink_post(self, names: Iterable[str], post_id: int, likes: int, timestamp: datetime) -> None:
        """Remove a deleted post from ``names`` and take back its likes."""
        for name in names:
            entry = self.hashtags.get(name)
            if entry is None:
                continue
            if post_id in entry.post_ids:
                entry.post_ids.remove(post_id)
            entry.post_count = max(0, entry.post_count - likes)
        self.touch(timestamp)

    def record_like(self, names: Iterable[str], post_id: int, timestamp: datetime) -> None:
        """Count a like against every hashtag of the liked post.

        An entry missing from the index is created with a count of one.
        """
        for name in names:
            entry = self.hashtags.get(name)
            if entry is None:
                self.hashtags[name] = Hashtag(name=name, post_ids=[post_id], post_count=1)
            else:
                entry.post_count += 1
        self.touch(timestamp)

    def record_unlike(self, names: Iterable[str], timestamp: datetime) -> None:
        for name in names:
            entry = self.hashtags.get(name)
            if entry is not None:
                entry.post_count = max(0, entry.post_count - 1)
        self.touch(timestamp)

    def top(self) -> list[Hashtag]:
        """Return every hashtag, most liked first once there are enough of them.

        With fewer than TOP_HASHTAGS_SORT_MIN entries the index order is
        returned unsorted. Equal counts are ordered by name.
        """
        entries = list(self.hashtags.values())
        if len(entries) < TOP_HASHTAGS_SORT_MIN:
            return entries
        return sorted(entries, key=lambda h: (-h.post_count, h.name))

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "hashtags": [h.model_dump() for h in self.hashtags.values()],
            "hashtag_count": len(self.hashtags),
        }

    def validate_state(self) -> list[str]:
        issues = []
        for name, entry in self.hashtags.items():
            if entry.name != name:
                issues.append(f"Hashtag keyed by {name} is named {entry.name}")
            if len(set(entry.post_ids)) != len(entry.post_ids):
                issues.append(f"Hashtag {name} lists a post more than once")
        return issues

    def clear(self) -> None:
        self.hashtags.clear()
        self.update_count = 0

    @property
    def summary(self) -> str:
        return f"{len(self.hashtags)} hashtags"
