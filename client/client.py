"""Main Content Store client classes.

This module provides the main entry points for interacting with the API:
- ContentStoreClient: Synchronous client
- AsyncContentStoreClient: Asynchronous client

Both clients act as one caller identity (sent in the X-Identity header) and
expose the API through namespaced sub-clients (client.profiles,
client.posts, client.comments, client.graph, client.discovery,
client.admin).

Example:
    Synchronous usage::

        from client import ContentStoreClient

        with ContentStoreClient(identity="alice-id") as client:
            client.profiles.register(username="alice")
            post_id = client.posts.create("blob-1", "photo", "hello #first")

    Asynchronous usage::

        from client import AsyncContentStoreClient

        async with AsyncContentStoreClient(identity="bob-id") as client:
            await client.posts.like(post_id)
"""

from typing import Any

from client._admin import AdminClient, AsyncAdminClient
from client._comments import AsyncCommentsClient, CommentsClient
from client._discovery import AsyncDiscoveryClient, DiscoveryClient
from client._graph import AsyncGraphClient, GraphClient
from client._http import DEFAULT_IDENTITY_HEADER, AsyncHTTPClient, HTTPClient
from client._posts import AsyncPostsClient, PostsClient
from client._profiles import AsyncProfilesClient, ProfilesClient
from client.models import HealthResponse


class ContentStoreClient:
    """Synchronous client for the Content Store REST API.

    Attributes:
        base_url: The base URL of the server.
        identity: Caller identity sent with every request (None is anonymous).
        timeout: Request timeout in seconds.
        retry_enabled: Whether automatic retry is enabled.
        max_retries: Maximum number of retry attempts.

    Example:
        Manual lifecycle management::

            client = ContentStoreClient(identity="alice-id")
            try:
                client.graph.follow("bob-id")
            finally:
                client.close()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        identity: str | None = None,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
        identity_header: str = DEFAULT_IDENTITY_HEADER,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: The base URL of the server (default: http://localhost:8000).
            identity: Caller identity; None makes every call anonymous.
            timeout: Request timeout in seconds (default: 30.0).
            retry_enabled: Whether to retry connection errors, timeouts and
                HTTP 502/503/504 with exponential backoff (default: False).
            max_retries: Maximum number of retry attempts (default: 3).
            transport: Custom HTTP transport (e.g. for testing).
            identity_header: Header carrying the identity; must match the
                server's configured header.
        """
        self.base_url = base_url
        self.identity = identity
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._http = HTTPClient(
            base_url=base_url,
            identity=identity,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
            identity_header=identity_header,
        )

        # Sub-clients are created lazily
        self._profiles: ProfilesClient | None = None
        self._posts: PostsClient | None = None
        self._comments: CommentsClient | None = None
        self._graph: GraphClient | None = None
        self._discovery: DiscoveryClient | None = None
        self._admin: AdminClient | None = None

    def __enter__(self) -> "ContentStoreClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def health(self) -> HealthResponse:
        """Check server health."""
        return HealthResponse(**self._http.get("/health"))

    @property
    def profiles(self) -> ProfilesClient:
        """Registration and profile endpoints (/profiles/*)."""
        if self._profiles is None:
            self._profiles = ProfilesClient(self._http)
        return self._profiles

    @property
    def posts(self) -> PostsClient:
        """Post, feed and like endpoints (/posts/*)."""
        if self._posts is None:
            self._posts = PostsClient(self._http)
        return self._posts

    @property
    def comments(self) -> CommentsClient:
        if self._comments is None:
            self._comments = CommentsClient(self._http)
        return self._comments

    @property
    def graph(self) -> GraphClient:
        """Follow graph endpoints (/users/*)."""
        if self._graph is None:
            self._graph = GraphClient(self._http)
        return self._graph

    @property
    def discovery(self) -> DiscoveryClient:
        """Search, hashtag, trending and analytics endpoints."""
        if self._discovery is None:
            self._discovery = DiscoveryClient(self._http)
        return self._discovery

    @property
    def admin(self) -> AdminClient:
        """Role, visual effect and store maintenance endpoints."""
        if self._admin is None:
            self._admin = AdminClient(self._http)
        return self._admin


class AsyncContentStoreClient:
    """Asynchronous client for the Content Store REST API.

    Same sub-client layout as ContentStoreClient with awaitable methods.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        identity: str | None = None,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
        identity_header: str = DEFAULT_IDENTITY_HEADER,
    ) -> None:
        self.base_url = base_url
        self.identity = identity
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._http = AsyncHTTPClient(
            base_url=base_url,
            identity=identity,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
            identity_header=identity_header,
        )

        self._profiles: AsyncProfilesClient | None = None
        self._posts: AsyncPostsClient | None = None
        self._comments: AsyncCommentsClient | None = None
        self._graph: AsyncGraphClient | None = None
        self._discovery: AsyncDiscoveryClient | None = None
        self._admin: AsyncAdminClient | None = None

    async def __aenter__(self) -> "AsyncContentStoreClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.close()

    async def health(self) -> HealthResponse:
        return HealthResponse(**(await self._http.get("/health")))

    @property
    def profiles(self) -> AsyncProfilesClient:
        if self._profiles is None:
            self._profiles = AsyncProfilesClient(self._http)
        return self._profiles

    @property
    def posts(self) -> AsyncPostsClient:
        if self._posts is None:
            self._posts = AsyncPostsClient(self._http)
        return self._posts

    @property
    def comments(self) -> AsyncCommentsClient:
        if self._comments is None:
            self._comments = AsyncCommentsClient(self._http)
        return self._comments

    @property
    def graph(self) -> AsyncGraphClient:
        if self._graph is None:
            self._graph = AsyncGraphClient(self._http)
        return self._graph

    @property
    def discovery(self) -> AsyncDiscoveryClient:
        if self._discovery is None:
            self._discovery = AsyncDiscoveryClient(self._http)
        return self._discovery

    @property
    def admin(self) -> AsyncAdminClient:
        if self._admin is None:
            self._admin = AsyncAdminClient(self._http)
        return self._admin
