"""Unit tests for ContentStore search, hashtags and analytics."""

import pytest

from models.errors import UnauthorizedError
from tests.fixtures.store import ADMIN, ALICE, BOB, CAROL, create_content_store, create_post, register_user


class TestSearchUsers:
    def test_case_insensitive_substring(self, content_store):
        register_user(content_store, ALICE, "Alice")
        register_user(content_store, BOB, "bob")
        register_user(content_store, CAROL, "malice")

        assert [p.username for p in content_store.search_users("ali", 0, 10)] == ["Alice", "malice"]
        assert [p.username for p in content_store.search_users("ali", 1, 1)] == ["malice"]
        assert content_store.search_users("zzz", 0, 10) == []


class TestTopHashtags:
    def test_counts_follow_likes(self, social_store):
        p1 = create_post(social_store, ALICE, caption="#a #b")
        p2 = create_post(social_store, BOB, caption="#c")
        social_store.like(BOB, p1)
        social_store.like(CAROL, p2)
        social_store.like(ALICE, p2)

        assert [(h.name, h.post_count) for h in social_store.get_top_hashtags()] == [
            ("#c", 2),
            ("#a", 1),
            ("#b", 1),
        ]


class TestAnalyticsBeforeRefresh:
    def test_views_start_empty(self, social_store):
        create_post(social_store, ALICE)

        assert social_store.get_trending_posts() == []
        assert social_store.get_top_trending_users() == []
        assert social_store.get_trending_features() is None
        assert social_store.get_related_features("#a") is None
        assert social_store.get_feature_details("#a") is None
        assert social_store.get_engagement_rate("1", "post") == 0.0
        assert social_store.is_viral("1", "post") is False


class TestRefreshAnalytics:
    @pytest.fixture
    def store(self):
        store = create_content_store(viral_engagement_threshold=2.0)
        for identity in (ALICE, BOB, CAROL):
            register_user(store, identity)
        return store

    def test_admin_only(self, store):
        with pytest.raises(UnauthorizedError):
            store.refresh_analytics(ALICE)

    def test_refresh_builds_views(self, store):
        p1 = create_post(store, ALICE, caption="#sun #sea")
        p2 = create_post(store, BOB, caption="#sun")
        p3 = create_post(store, CAROL, caption="quiet")
        store.like(BOB, p1)
        store.like(CAROL, p1)
        store.like(ALICE, p2)
        store.add_comment(BOB, p2, "nice")

        result = store.refresh_analytics(ADMIN)

        assert result == {"trending_posts": 2, "trending_users": 2, "features": 2, "engagement_rates": 5}
        assert [(t.post_id, t.likes_count) for t in store.get_trending_posts()] == [(p1, 2), (p2, 1)]
        assert [u.username for u in store.get_top_trending_users()] == ["alice", "bob"]

        sun = store.get_feature_details("#sun")
        assert sun.posts_count == 2
        assert sun.engagement_rate == 2  # (2 + 0 + 1 + 1) // 2
        assert [f.name for f in store.get_trending_features()] == ["#sea", "#sun"]
        assert [f.name for f in store.get_related_features("#sea")] == ["#sun"]
        assert store.get_related_features("#nope") is None

        assert store.get_engagement_rate(str(p1), "post") == 2.0
        assert store.get_engagement_rate("#sun", "hashtag") == 2.0
        assert store.is_viral(str(p1), "post")
        assert not store.is_viral(str(p3), "post")

    def test_post_rate_divides_by_followers(self, store):
        post_id = create_post(store, ALICE)
        store.follow(BOB, ALICE)
        store.follow(CAROL, ALICE)
        store.like(BOB, post_id)
        store.add_comment(CAROL, post_id, "hi")
        store.add_comment(BOB, post_id, "hey")

        store.refresh_analytics(ADMIN)

        assert store.get_engagement_rate(str(post_id), "post") == 1.5

    def test_refresh_replaces_previous_views(self, store):
        post_id = create_post(store, ALICE, caption="#x")
        store.like(BOB, post_id)
        store.refresh_analytics(ADMIN)

        store.delete_post(ALICE, post_id)
        store.refresh_analytics(ADMIN)

        assert store.get_trending_posts() == []
        assert store.get_trending_features() is None
        assert store.get_engagement_rate(str(post_id), "post") == 0.0
