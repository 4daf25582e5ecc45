"""Unit tests for the namespaced sub-clients.

Each sub-client is exercised against a mocked HTTP client to check the
paths, bodies and response parsing, without a server.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from client._admin import AdminClient, AsyncAdminClient
from client._comments import AsyncCommentsClient, CommentsClient
from client._discovery import AsyncDiscoveryClient, DiscoveryClient
from client._graph import AsyncGraphClient, GraphClient
from client._posts import AsyncPostsClient, PostsClient
from client._profiles import AsyncProfilesClient, ProfilesClient
from client.models import MediaType, UserRole

PROFILE = {
    "identity": "alice-id",
    "username": "alice",
    "bio": "",
    "avatar": None,
    "followers_count": 0,
    "following_count": 0,
    "total_likes": 0,
    "posts_count": 0,
    "created_at": "2025-01-01T12:00:00+00:00",
}

POST = {
    "id": 1,
    "author_identity": "alice-id",
    "media": "blob",
    "media_type": "photo",
    "caption": "hi #fun",
    "hashtags": ["#fun"],
    "likes_count": 0,
    "comments_count": 0,
    "created_at": "2025-01-01T12:00:00+00:00",
}


def page_of(items: list, page: int = 0, page_size: int = 20) -> dict:
    return {"page": page, "page_size": page_size, "items": items, "returned_count": len(items)}


@pytest.fixture
def http():
    return MagicMock()


@pytest.fixture
def async_http():
    mock = MagicMock()
    mock.get = AsyncMock()
    mock.post = AsyncMock()
    mock.put = AsyncMock()
    mock.delete = AsyncMock()
    return mock


class TestProfilesClient:
    def test_register(self, http):
        http.post.return_value = PROFILE

        profile = ProfilesClient(http).register("alice", bio="hi")

        http.post.assert_called_once_with(
            "/profiles/register", json={"username": "alice", "bio": "hi", "avatar": None}, params=None
        )
        assert profile.username == "alice"

    def test_get_own_none(self, http):
        http.get.return_value = None
        assert ProfilesClient(http).get_own() is None
        http.get.assert_called_once_with("/profiles/me", params=None)

    def test_get_encodes_identity(self, http):
        http.get.return_value = PROFILE
        ProfilesClient(http).get("a/b")
        http.get.assert_called_once_with("/profiles/a%2Fb", params=None)

    async def test_async_update(self, async_http):
        async_http.put.return_value = PROFILE
        profile = await AsyncProfilesClient(async_http).update("alice", bio="new")
        async_http.put.assert_awaited_once_with(
            "/profiles/me", json={"username": "alice", "bio": "new", "avatar": None}, params=None
        )
        assert profile.identity == "alice-id"


class TestPostsClient:
    def test_create_returns_id(self, http):
        http.post.return_value = {"status": "ok", "message": "created", "id": 3}

        post_id = PostsClient(http).create("blob", MediaType.VIDEO, "clip", ["#a"])

        assert post_id == 3
        http.post.assert_called_once_with(
            "/posts",
            json={"media": "blob", "media_type": "video", "caption": "clip", "hashtags": ["#a"]},
            params=None,
        )

    def test_create_rejects_unknown_media_type(self, http):
        with pytest.raises(ValueError):
            PostsClient(http).create("blob", "audio")
        http.post.assert_not_called()

    def test_feed(self, http):
        http.get.return_value = page_of([POST], page_size=5)

        page = PostsClient(http).feed(page=0, page_size=5)

        http.get.assert_called_once_with("/posts/feed", params={"page": 0, "page_size": 5})
        assert page.items[0].id == 1

    def test_like_and_is_liked(self, http):
        client = PostsClient(http)
        http.post.return_value = {"status": "ok", "message": "liked"}
        http.get.return_value = {"value": True}

        client.like(1)
        assert client.is_liked(1) is True
        http.post.assert_called_once_with("/posts/1/like", json=None, params=None)

    async def test_async_unlike(self, async_http):
        async_http.delete.return_value = {"status": "ok", "message": "unliked"}
        await AsyncPostsClient(async_http).unlike(4)
        async_http.delete.assert_awaited_once_with("/posts/4/like", params=None)


class TestCommentsClient:
    def test_add(self, http):
        http.post.return_value = {"status": "ok", "message": "added", "id": 9}
        assert CommentsClient(http).add(1, "nice") == 9
        http.post.assert_called_once_with("/posts/1/comments", json={"text": "nice"}, params=None)

    def test_delete(self, http):
        http.delete.return_value = {"status": "ok", "message": "deleted"}
        CommentsClient(http).delete(9)
        http.delete.assert_called_once_with("/comments/9", params=None)

    async def test_async_list(self, async_http):
        comment = {"id": 1, "post_id": 1, "author_identity": "bob-id", "text": "hi", "created_at": POST["created_at"]}
        async_http.get.return_value = page_of([comment])
        page = await AsyncCommentsClient(async_http).list(1)
        assert page.items[0].text == "hi"


class TestGraphClient:
    def test_follow(self, http):
        http.post.return_value = {"status": "ok", "message": "followed"}
        GraphClient(http).follow("alice-id")
        http.post.assert_called_once_with("/users/alice-id/follow", json=None, params=None)

    def test_followers(self, http):
        http.get.return_value = page_of(["bob-id"])
        assert GraphClient(http).followers("alice-id").items == ["bob-id"]
        http.get.assert_called_once_with("/users/alice-id/followers", params={"page": 0, "page_size": None})

    async def test_async_is_following(self, async_http):
        async_http.get.return_value = {"value": False}
        assert await AsyncGraphClient(async_http).is_following("alice-id") is False


class TestDiscoveryClient:
    def test_search_users(self, http):
        http.get.return_value = page_of([PROFILE])
        DiscoveryClient(http).search_users("ali", page=1, page_size=2)
        http.get.assert_called_once_with("/search/users", params={"q": "ali", "page": 1, "page_size": 2})

    def test_feature_name_encoded(self, http):
        http.get.return_value = None
        assert DiscoveryClient(http).feature("#fun") is None
        http.get.assert_called_once_with("/features/%23fun", params=None)

    def test_trending_features_none_before_refresh(self, http):
        http.get.return_value = None
        assert DiscoveryClient(http).trending_features() is None

    def test_engagement_rate(self, http):
        http.get.return_value = {"content_id": "1", "content_type": "post", "engagement_rate": 2.5}
        assert DiscoveryClient(http).engagement_rate(1) == 2.5
        http.get.assert_called_once_with(
            "/analytics/engagement", params={"content_id": "1", "content_type": "post"}
        )

    async def test_async_refresh(self, async_http):
        async_http.post.return_value = {"trending_posts": 1, "trending_users": 1, "features": 0, "engagement_rates": 1}
        result = await AsyncDiscoveryClient(async_http).refresh_analytics()
        assert result.trending_posts == 1


class TestAdminClient:
    def test_assign_role(self, http):
        http.post.return_value = {"status": "ok", "message": "assigned"}
        AdminClient(http).assign_role("bob-id", "admin")
        http.post.assert_called_once_with("/roles", json={"identity": "bob-id", "role": "admin"}, params=None)

    def test_get_role(self, http):
        http.get.return_value = {"role": "guest"}
        assert AdminClient(http).get_role() == UserRole.GUEST

    def test_create_effect(self, http):
        http.post.return_value = {
            "name": "glow",
            "effect_type": "filter",
            "intensity": 50,
            "preview_url": "",
            "creator_identity": "alice-id",
            "created_at": POST["created_at"],
        }
        effect = AdminClient(http).create_effect("glow", "filter", intensity=500)
        assert effect.intensity == 50

    async def test_async_validate(self, async_http):
        async_http.get.return_value = {"valid": True, "issues": []}
        report = await AsyncAdminClient(async_http).validate_store()
        assert report.valid
