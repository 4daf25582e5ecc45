"""Comment table."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from models.base_table import StoreTable
from models.entities import Comment


class CommentTable(StoreTable):
    """Comments keyed by id, plus the id allocator.

    Args:
        table_name: Always "comments".
        comments: Mapping from comment id to comment.
        next_id: Id handed out by the next allocate_id() call.
    """

    table_name: str = Field(default="comments", frozen=True)
    comments: dict[int, Comment] = Field(default_factory=dict)
    next_id: int = Field(default=1, ge=1)

    def allocate_id(self) -> int:
        comment_id = self.next_id
        self.next_id += 1
        return comment_id

    def get(self, comment_id: int) -> Optional[Comment]:
        return self.comments.get(comment_id)

    def add(self, comment: Comment, timestamp: datetime) -> None:
        self.comments[comment.id] = comment
        self.touch(timestamp)

    def remove(self, comment_id: int, timestamp: datetime) -> Comment:
        comment = self.comments.pop(comment_id)
        self.touch(timestamp)
        return comment

    def for_post(self, post_id: int) -> list[Comment]:
        """Comments on a post, oldest first (ties broken by id)."""
        return sorted(
            (c for c in self.comments.values() if c.post_id == post_id),
            key=lambda c: (c.created_at, c.id),
        )

    def remove_for_post(self, post_id: int, timestamp: datetime) -> list[Comment]:
        """Remove every comment attached to a post and return them."""
        removed = [c for c in self.comments.values() if c.post_id == post_id]
        for comment in removed:
            del self.comments[comment.id]
        if removed:
            self.touch(timestamp)
        return removed

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "comments": [c.to_dict() for c in self.comments.values()],
            "comment_count": len(self.comments),
            "next_id": self.next_id,
        }

    def validate_state(self) -> list[str]:
        return [
            f"Comment keyed by {comment_id} has id {comment.id}"
            for comment_id, comment in self.comments.items()
            if comment.id != comment_id
        ]

    def clear(self) -> None:
        self.comments.clear()
        self.next_id = 1
        self.update_count = 0

    @property
    def summary(self) -> str:
        return f"{len(self.comments)} comments"
