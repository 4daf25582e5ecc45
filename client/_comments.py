"""Comment sub-client for the Content Store API.

Comments are created and listed under their post (/posts/{id}/comments)
and deleted by id (/comments/{id}).

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient, _page_params
from client.models import ActionResponse, Comment, PageResponse


class CommentsClient(BaseClient):
    """Synchronous client for comment endpoints.

    Example:
        with ContentStoreClient(identity="bob-id") as client:
            comment_id = client.comments.add(post_id, "nice!")
            page = client.comments.list(post_id)
    """

    def add(self, post_id: int, text: str) -> int:
        """Comment on a post as the caller.

        Returns:
            The new comment id.

        Raises:
            ForbiddenError: If the client is anonymous.
            NotFoundError: If the post does not exist.
        """
        data = self._post(f"/posts/{post_id}/comments", json={"text": text})
        return ActionResponse(**data).id

    def delete(self, comment_id: int) -> ActionResponse:
        """Delete one of the caller's comments.

        Raises:
            NotFoundError: If the comment does not exist.
            ForbiddenError: If the caller is not the comment author.
        """
        data = self._delete(f"/comments/{comment_id}")
        return ActionResponse(**data)

    def list(self, post_id: int, page: int = 0, page_size: int | None = None) -> PageResponse[Comment]:
        """Get one page of a post's comments, oldest first."""
        data = self._get(f"/posts/{post_id}/comments", params=_page_params(page, page_size))
        return PageResponse[Comment](**data)


class AsyncCommentsClient(AsyncBaseClient):
    """Asynchronous client for comment endpoints."""

    async def add(self, post_id: int, text: str) -> int:
        data = await self._post(f"/posts/{post_id}/comments", json={"text": text})
        return ActionResponse(**data).id

    async def delete(self, comment_id: int) -> ActionResponse:
        data = await self._delete(f"/comments/{comment_id}")
        return ActionResponse(**data)

    async def list(self, post_id: int, page: int = 0, page_size: int | None = None) -> PageResponse[Comment]:
        data = await self._get(f"/posts/{post_id}/comments", params=_page_params(page, page_size))
        return PageResponse[Comment](**data)
