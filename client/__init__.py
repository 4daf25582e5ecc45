"""Content Store API Client Library.

A typed Python client for the Content Store REST API, in synchronous and
asynchronous flavours.

Example:
    Synchronous usage::

        from client import ContentStoreClient

        with ContentStoreClient(identity="alice-id") as client:
            client.profiles.register(username="alice")
            feed = client.posts.feed()

Exports:
    ContentStoreClient: Synchronous client.
    AsyncContentStoreClient: Asynchronous client.

    Exceptions:
        ContentStoreClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ForbiddenError: Caller lacks capability or ownership (HTTP 403).
        NotFoundError: Resource not found (HTTP 404).
        ConflictError: State conflict (HTTP 409).
        ValidationError: Request validation failed (HTTP 422).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._admin import AdminClient, AsyncAdminClient
from client._comments import AsyncCommentsClient, CommentsClient
from client._discovery import AsyncDiscoveryClient, DiscoveryClient
from client._graph import AsyncGraphClient, GraphClient
from client._posts import AsyncPostsClient, PostsClient
from client._profiles import AsyncProfilesClient, ProfilesClient
from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    ContentStoreClientError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from client.models import (
    ActionResponse,
    Comment,
    EngagementRateResponse,
    Hashtag,
    HealthResponse,
    MediaType,
    PageResponse,
    Post,
    RefreshAnalyticsResponse,
    SocialFeature,
    StoreStateResponse,
    TrendingPost,
    TrendingUser,
    UserProfile,
    UserRole,
    ValidationReportResponse,
    VisualEffect,
)
from client.client import AsyncContentStoreClient, ContentStoreClient

__all__ = [
    # Main clients
    "ContentStoreClient",
    "AsyncContentStoreClient",
    # Sub-clients
    "ProfilesClient",
    "AsyncProfilesClient",
    "PostsClient",
    "AsyncPostsClient",
    "CommentsClient",
    "AsyncCommentsClient",
    "GraphClient",
    "AsyncGraphClient",
    "DiscoveryClient",
    "AsyncDiscoveryClient",
    "AdminClient",
    "AsyncAdminClient",
    # Exceptions
    "ContentStoreClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "ServerError",
    # Models
    "ActionResponse",
    "Comment",
    "EngagementRateResponse",
    "Hashtag",
    "HealthResponse",
    "MediaType",
    "PageResponse",
    "Post",
    "RefreshAnalyticsResponse",
    "SocialFeature",
    "StoreStateResponse",
    "TrendingPost",
    "TrendingUser",
    "UserProfile",
    "UserRole",
    "ValidationReportResponse",
    "VisualEffect",
]
