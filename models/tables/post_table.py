"""Post table."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from models.base_table import StoreTable
from models.entities import Post


class PostTable(StoreTable):
    """Posts keyed by id, plus the id allocator.

    Listing views are materialized on every call. Dictionary order is id
    order, and Python's sort is stable, so every view breaks ties on id
    ascending without an explicit secondary key.

    Args:
        table_name: Always "posts".
        posts: Mapping from post id to post.
        next_id: Id handed out by the next allocate_id() call.
    """

    table_name: str = Field(default="posts", frozen=True)
    posts: dict[int, Post] = Field(default_factory=dict)
    next_id: int = Field(default=1, ge=1)

    def allocate_id(self) -> int:
        """Reserve and return the next post id."""
        post_id = self.next_id
        self.next_id += 1
        return post_id

    def get(self, post_id: int) -> Optional[Post]:
        return self.posts.get(post_id)

    def add(self, post: Post, timestamp: datetime) -> None:
        self.posts[post.id] = post
        self.touch(timestamp)

    def remove(self, post_id: int, timestamp: datetime) -> Post:
        """Remove and return a post.

        Raises:
            KeyError: If the post does not exist.
        """
        post = self.posts.pop(post_id)
        self.touch(timestamp)
        return post

    def adjust_likes(self, post_id: int, delta: int, timestamp: datetime) -> None:
        post = self.posts[post_id]
        post.likes_count = max(0, post.likes_count + delta)
        self.touch(timestamp)

    def adjust_comments(self, post_id: int, delta: int, timestamp: datetime) -> None:
        post = self.posts[post_id]
        post.comments_count = max(0, post.comments_count + delta)
        self.touch(timestamp)

    # ===== Views =====

    def recent(self) -> list[Post]:
        """All posts, newest first."""
        return sorted(self.posts.values(), key=lambda p: p.created_at, reverse=True)

    def by_author(self, identity: str) -> list[Post]:
        """Posts by one author, newest first."""
        return [p for p in self.recent() if p.author_identity == identity]

    def most_liked(self) -> list[Post]:
        """All posts ordered by likes, most liked first."""
        return sorted(self.posts.values(), key=lambda p: p.likes_count, reverse=True)

    def search(self, query: str) -> list[Post]:
        """Posts whose caption contains ``query`` ignoring case, newest first."""
        needle = query.lower()
        return [p for p in self.recent() if needle in p.caption.lower()]

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "posts": [p.to_dict() for p in self.posts.values()],
            "post_count": len(self.posts),
            "next_id": self.next_id,
        }

    def validate_state(self) -> list[str]:
        issues = []
        for post_id, post in self.posts.items():
            if post.id != post_id:
                issues.append(f"Post keyed by {post_id} has id {post.id}")
            if post.id >= self.next_id:
                issues.append(f"Post {post.id} is not below next_id {self.next_id}")
        return issues

    def clear(self) -> None:
        self.posts.clear()
        self.next_id = 1
        self.update_count = 0

    @property
    def summary(self) -> str:
        return f"{len(self.posts)} posts"
