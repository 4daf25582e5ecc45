"""Follow relation table."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from models.base_table import StoreTable


class FollowTable(StoreTable):
    """Two mirrored indices of the follow graph.

    ``following[a]`` lists who ``a`` follows and ``followers[b]`` lists who
    follows ``b``. Both are updated together so that
    ``b in following[a]`` exactly when ``a in followers[b]``. Lists keep
    insertion order for paginated listings.

    Args:
        table_name: Always "follows".
        following: Mapping from follower to followees.
        followers: Mapping from followee to followers.
    """

    table_name: str = Field(default="follows", frozen=True)
    following: dict[str, list[str]] = Field(default_factory=dict)
    followers: dict[str, list[str]] = Field(default_factory=dict)

    def has_following_set(self, identity: str) -> bool:
        return identity in self.following

    def is_following(self, follower: str, target: str) -> bool:
        return target in self.following.get(follower, ())

    def follow(self, follower: str, target: str, timestamp: datetime) -> None:
        self.following.setdefault(follower, []).append(target)
        self.followers.setdefault(target, []).append(follower)
        self.touch(timestamp)

    def unfollow(self, follower: str, target: str, timestamp: datetime) -> None:
        self.following[follower].remove(target)
        if follower in self.followers.get(target, ()):
            self.followers[target].remove(follower)
        self.touch(timestamp)

    def followers_of(self, identity: str) -> list[str]:
        return list(self.followers.get(identity, ()))

    def following_of(self, identity: str) -> list[str]:
        return list(self.following.get(identity, ()))

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "following": {k: list(v) for k, v in self.following.items()},
            "followers": {k: list(v) for k, v in self.followers.items()},
            "edge_count": sum(len(v) for v in self.following.values()),
        }

    def validate_state(self) -> list[str]:
        issues = []
        for follower, targets in self.following.items():
            if len(set(targets)) != len(targets):
                issues.append(f"{follower} follows the same identity more than once")
            for target in targets:
                if follower == target:
                    issues.append(f"{follower} follows themselves")
                if follower not in self.followers.get(target, ()):
                    issues.append(f"{follower} follows {target} but is missing from their followers")
        for target, sources in self.followers.items():
            for follower in sources:
                if target not in self.following.get(follower, ()):
                    issues.append(f"{follower} listed as follower of {target} without a following edge")
        return issues

    def clear(self) -> None:
        self.following.clear()
        self.followers.clear()
        self.update_count = 0

    @property
    def summary(self) -> str:
        return f"{sum(len(v) for v in self.following.values())} follow edges"
