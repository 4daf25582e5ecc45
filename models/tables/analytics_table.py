"""Derived analytics views."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from models.base_table import StoreTable
from models.entities import SocialFeature, TrendingPost, TrendingUser


def engagement_key(content_id: str, content_type: str) -> str:
    """Key of an engagement-rate entry, e.g. ``post:12`` or ``hashtag:#fun``."""
    return f"{content_type.lower()}:{content_id}"


class AnalyticsTable(StoreTable):
    """Aggregates produced by ContentStore.refresh_analytics().

    Nothing else writes to this table. Until the first refresh every view
    is empty.

    Args:
        table_name: Always "analytics".
        trending_posts: Most liked posts at the last refresh.
        top_trending_users: Authors ranked by trending post count.
        features: Social-feature catalog keyed by feature name.
        related_features: Feature name to names of features sharing a post.
        engagement_rates: Engagement rate keyed by engagement_key().
        refreshed_at: When the last refresh ran, if ever.
    """

    table_name: str = Field(default="analytics", frozen=True)
    trending_posts: list[TrendingPost] = Field(default_factory=list)
    top_trending_users: list[TrendingUser] = Field(default_factory=list)
    features: dict[str, SocialFeature] = Field(default_factory=dict)
    related_features: dict[str, list[str]] = Field(default_factory=dict)
    engagement_rates: dict[str, float] = Field(default_factory=dict)
    refreshed_at: Optional[datetime] = None

    def replace(
        self,
        trending_posts: list[TrendingPost],
        top_trending_users: list[TrendingUser],
        features: dict[str, SocialFeature],
        related_features: dict[str, list[str]],
        engagement_rates: dict[str, float],
        timestamp: datetime,
    ) -> None:
        """Swap in a freshly computed set of aggregates."""
        self.trending_posts = trending_posts
        self.top_trending_users = top_trending_users
        self.features = features
        self.related_features = related_features
        self.engagement_rates = engagement_rates
        self.refreshed_at = timestamp
        self.touch(timestamp)

    def trending_features(self) -> Optional[list[SocialFeature]]:
        """Features by engagement rate, or None when the catalog is empty."""
        if not self.features:
            return None
        return sorted(self.features.values(), key=lambda f: (-f.engagement_rate, f.name))

    def related_to(self, name: str) -> Optional[list[SocialFeature]]:
        """Features related to ``name``, or None when ``name`` is unknown."""
        if name not in self.features:
            return None
        return [self.features[n] for n in self.related_features.get(name, []) if n in self.features]

    def engagement_rate(self, content_id: str, content_type: str) -> float:
        return self.engagement_rates.get(engagement_key(content_id, content_type), 0.0)

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "refreshed_at": self.refreshed_at.isoformat() if self.refreshed_at else None,
            "trending_posts": [t.model_dump() for t in self.trending_posts],
            "top_trending_users": [u.model_dump() for u in self.top_trending_users],
            "features": [f.model_dump() for f in self.features.values()],
            "related_features": {k: list(v) for k, v in self.related_features.items()},
            "engagement_rates": dict(self.engagement_rates),
        }

    def validate_state(self) -> list[str]:
        issues = []
        for name, related in self.related_features.items():
            if name in related:
                issues.append(f"Feature {name} lists itself as related")
        return issues

    def clear(self) -> None:
        self.trending_posts = []
        self.top_trending_users = []
        self.features = {}
        self.related_features = {}
        self.engagement_rates = {}
        self.refreshed_at = None
        self.update_count = 0

    @property
    def summary(self) -> str:
        if self.refreshed_at is None:
            return "analytics never refreshed"
        return (
            f"{len(self.trending_posts)} trending posts, {len(self.features)} features "
            f"(refreshed {self.refreshed_at.isoformat()})"
        )
