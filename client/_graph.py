"""Follow graph sub-client for the Content Store API.

This module provides GraphClient and AsyncGraphClient for the follow
endpoints and per-user listings (/users/*).

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient, _page_params, _segment
from client.models import ActionResponse, FlagResponse, PageResponse, Post


class GraphClient(BaseClient):
    """Synchronous client for follow graph endpoints (/users/*).

    Example:
        with ContentStoreClient(identity="bob-id") as client:
            client.graph.follow("alice-id")
            followers = client.graph.followers("alice-id")
    """

    _BASE_PATH = "/users"

    def follow(self, target: str) -> ActionResponse:
        """Follow another user.

        Raises:
            ForbiddenError: If the client is anonymous.
            ConflictError: If already following, or when following yourself.
        """
        data = self._post(f"{self._BASE_PATH}/{_segment(target)}/follow")
        return ActionResponse(**data)

    def unfollow(self, target: str) -> ActionResponse:
        """Stop following a user.

        Raises:
            NotFoundError: If the caller follows nobody.
            ConflictError: If the caller does not follow the target.
        """
        data = self._delete(f"{self._BASE_PATH}/{_segment(target)}/follow")
        return ActionResponse(**data)

    def is_following(self, target: str) -> bool:
        data = self._get(f"{self._BASE_PATH}/{_segment(target)}/follow")
        return FlagResponse(**data).value

    def followers(self, identity: str, page: int = 0, page_size: int | None = None) -> PageResponse[str]:
        """Get one page of identities following ``identity``."""
        data = self._get(
            f"{self._BASE_PATH}/{_segment(identity)}/followers", params=_page_params(page, page_size)
        )
        return PageResponse[str](**data)

    def following(self, identity: str, page: int = 0, page_size: int | None = None) -> PageResponse[str]:
        """Get one page of identities ``identity`` follows."""
        data = self._get(
            f"{self._BASE_PATH}/{_segment(identity)}/following", params=_page_params(page, page_size)
        )
        return PageResponse[str](**data)

    def posts(self, identity: str, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        """Get one page of a user's posts, newest first."""
        data = self._get(f"{self._BASE_PATH}/{_segment(identity)}/posts", params=_page_params(page, page_size))
        return PageResponse[Post](**data)


class AsyncGraphClient(AsyncBaseClient):
    """Asynchronous client for follow graph endpoints (/users/*)."""

    _BASE_PATH = "/users"

    async def follow(self, target: str) -> ActionResponse:
        data = await self._post(f"{self._BASE_PATH}/{_segment(target)}/follow")
        return ActionResponse(**data)

    async def unfollow(self, target: str) -> ActionResponse:
        data = await self._delete(f"{self._BASE_PATH}/{_segment(target)}/follow")
        return ActionResponse(**data)

    async def is_following(self, target: str) -> bool:
        data = await self._get(f"{self._BASE_PATH}/{_segment(target)}/follow")
        return FlagResponse(**data).value

    async def followers(self, identity: str, page: int = 0, page_size: int | None = None) -> PageResponse[str]:
        data = await self._get(
            f"{self._BASE_PATH}/{_segment(identity)}/followers", params=_page_params(page, page_size)
        )
        return PageResponse[str](**data)

    async def following(self, identity: str, page: int = 0, page_size: int | None = None) -> PageResponse[str]:
        data = await self._get(
            f"{self._BASE_PATH}/{_segment(identity)}/following", params=_page_params(page, page_size)
        )
        return PageResponse[str](**data)

    async def posts(self, identity: str, page: int = 0, page_size: int | None = None) -> PageResponse[Post]:
        data = await self._get(
            f"{self._BASE_PATH}/{_segment(identity)}/posts", params=_page_params(page, page_size)
        )
        return PageResponse[Post](**data)
