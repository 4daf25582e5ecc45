"""Profile table."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from models.base_table import StoreTable
from models.entities import UserProfile

COUNTER_FIELDS = ("followers_count", "following_count", "total_likes", "posts_count")


class ProfileTable(StoreTable):
    """Registered user profiles keyed by identity.

    Dictionary order is registration order, which is the order user search
    results are returned in.

    Args:
        table_name: Always "profiles".
        profiles: Mapping from identity to profile.
    """

    table_name: str = Field(default="profiles", frozen=True)
    profiles: dict[str, UserProfile] = Field(default_factory=dict)

    def get(self, identity: Optional[str]) -> Optional[UserProfile]:
        """Return the profile owned by ``identity``, if any."""
        if identity is None:
            return None
        return self.profiles.get(identity)

    def owner_of_username(self, username: str) -> Optional[str]:
        """Return the identity holding ``username`` (exact, case-sensitive match)."""
        for identity, profile in self.profiles.items():
            if profile.username == username:
                return identity
        return None

    def put(self, profile: UserProfile, timestamp: datetime) -> None:
        """Insert or overwrite the profile stored under ``profile.identity``."""
        self.profiles[profile.identity] = profile
        self.touch(timestamp)

    def adjust_counter(self, identity: str, counter: str, delta: int, timestamp: datetime) -> None:
        """Add ``delta`` to one of a profile's counters, flooring at zero.

        Missing profiles are skipped; a like or follow may reference an
        identity that never registered.

        Args:
            identity: Profile owner.
            counter: One of COUNTER_FIELDS.
            delta: Amount to add (negative to decrement).
            timestamp: Time of the change.

        Raises:
            ValueError: If ``counter`` is not a profile counter.
        """
        if counter not in COUNTER_FIELDS:
            raise ValueError(f"Unknown profile counter: {counter}")
        profile = self.profiles.get(identity)
        if profile is None:
            return
        setattr(profile, counter, max(0, getattr(profile, counter) + delta))
        self.touch(timestamp)

    def search(self, query: str) -> list[UserProfile]:
        """Return profiles whose username contains ``query``, ignoring case."""
        needle = query.lower()
        return [p for p in self.profiles.values() if needle in p.username.lower()]

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "profiles": [p.to_dict() for p in self.profiles.values()],
            "profile_count": len(self.profiles),
        }

    def validate_state(self) -> list[str]:
        issues = []
        seen: dict[str, str] = {}
        for identity, profile in self.profiles.items():
            if profile.identity != identity:
                issues.append(f"Profile keyed by {identity} claims identity {profile.identity}")
            if profile.username in seen:
                issues.append(
                    f"Username {profile.username!r} held by both {seen[profile.username]} and {identity}"
                )
            seen[profile.username] = identity
        return issues

    def clear(self) -> None:
        self.profiles.clear()
        self.update_count = 0

    @property
    def summary(self) -> str:
        return f"{len(self.profiles)} profiles"
