"""Post sub-client for the Content Store API.

This module provides PostsClient and AsyncPostsClient for the post
endpoints (/posts/*): publishing, deleting, the feed and trending
listings, and likes.

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient, _page_params
from client.models import ActionResponse, FlagResponse, MediaType, PageResponse, Post


def _create_body(
    media: str, media_type: MediaType | str, caption: str, hashtags: list[str] | None
) -> dict:
    return {
        "media": media,
        "media_type": MediaType(media_type).value,
        "caption": caption,
        "hashtags": hashtags,
    }


class PostsClient(BaseClient):
    """Synchronous client for post endpoints (/posts/*).

    Example:
        with ContentStoreClient(identity="alice-id") as client:
            post_id = client.posts.create("blob-1", "photo", "sunset #sky")
            client.posts.like(post_id)
            feed = client.posts.feed(page=0, page_size=10)
    """

    _BASE_PATH = "/posts"

    def create(
        self,
        media: str,
        media_type: MediaType | str,
        caption: str = "",
        hashtags: list[str] | None = None,
    ) -> int:
        """Publish a post as the caller.

        Args:
            media: Blob handle of the uploaded media.
            media_type: "photo" or "video".
            caption: Post caption.
            hashtags: Tag strings; only tokens starting with '#' are kept.
                When None, tags are taken from the caption.

        Returns:
            The new post id.

        Raises:
            ForbiddenError: If the client is anonymous.
        """
        data = self._post(self._BASE_PATH, json=_create_body(media, media_type, caption, hashtags))
        return ActionResponse(**data).id

    def delete(self, post_id: int) -> ActionResponse:
        """Delete one of the caller's posts along with its likes and comments.

        Raises:
            NotFoundError: If the post does not exist.
            ForbiddenError: If the caller is not the author.
        """
        data = self._delete(f"{self._BASE_PATH}/{post_id}")
        return ActionResponse(**data)

    def get(self, post_id: int) -> Post | None:
        data = self._get(f"{self._BASE_PATH}/{post_id}")
        return Post(**data) if data else None

    def feed(self, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        """Get one page of all posts, newest first."""
        data = self._get(f"{self._BASE_PATH}/feed", params=_page_params(page, page_size))
        return PageResponse[Post](**data)

    def trending(self, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        """Get one page of posts ordered by likes, most liked first."""
        data = self._get(f"{self._BASE_PATH}/trending", params=_page_params(page, page_size))
        return PageResponse[Post](**data)

    # Likes

    def like(self, post_id: int) -> ActionResponse:
        """Like a post.

        Raises:
            NotFoundError: If the post does not exist.
            ConflictError: If the caller already likes it.
        """
        data = self._post(f"{self._BASE_PATH}/{post_id}/like")
        return ActionResponse(**data)

    def unlike(self, post_id: int) -> ActionResponse:
        """Withdraw the caller's like.

        Raises:
            NotFoundError: If the post was never liked.
            ConflictError: If the caller does not like it.
        """
        data = self._delete(f"{self._BASE_PATH}/{post_id}/like")
        return ActionResponse(**data)

    def is_liked(self, post_id: int) -> bool:
        data = self._get(f"{self._BASE_PATH}/{post_id}/like")
        return FlagResponse(**data).value


class AsyncPostsClient(AsyncBaseClient):
    """Asynchronous client for post endpoints (/posts/*)."""

    _BASE_PATH = "/posts"

    async def create(
        self,
        media: str,
        media_type: MediaType | str,
        caption: str = "",
        hashtags: list[str] | None = None,
    ) -> int:
        data = await self._post(self._BASE_PATH, json=_create_body(media, media_type, caption, hashtags))
        return ActionResponse(**data).id

    async def delete(self, post_id: int) -> ActionResponse:
        data = await self._delete(f"{self._BASE_PATH}/{post_id}")
        return ActionResponse(**data)

    async def get(self, post_id: int) -> Post | None:
        data = await self._get(f"{self._BASE_PATH}/{post_id}")
        return Post(**data) if data else None

    async def feed(self, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        data = await self._get(f"{self._BASE_PATH}/feed", params=_page_params(page, page_size))
        return PageResponse[Post](**data)

    async def trending(self, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        data = await self._get(f"{self._BASE_PATH}/trending", params=_page_params(page, page_size))
        return PageResponse[Post](**data)

    async def like(self, post_id: int) -> ActionResponse:
        data = await self._post(f"{self._BASE_PATH}/{post_id}/like")
        return ActionResponse(**data)

    async def unlike(self, post_id: int) -> ActionResponse:
        data = await self._delete(f"{self._BASE_PATH}/{post_id}/like")
        return ActionResponse(**data)

    async def is_liked(self, post_id: int) -> bool:
        data = await self._get(f"{self._BASE_PATH}/{post_id}/like")
        return FlagResponse(**data).value
