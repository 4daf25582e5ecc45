"""Exception hierarchy for the Content Store API client.

Exception Hierarchy:
    ContentStoreClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Server returned an error response
        ├── ForbiddenError (HTTP 403) - caller lacks capability or ownership
        ├── NotFoundError (HTTP 404)
        ├── ConflictError (HTTP 409) - duplicate username, already liked, ...
        ├── ValidationError (HTTP 422)
        └── ServerError (HTTP 5xx)

Example:
    Catching a specific store condition::

        try:
            client.posts.like(post_id)
        except ConflictError:
            pass  # already liked
"""

from typing import Any


class ContentStoreClientError(Exception):
    """Base exception for all client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(ContentStoreClientError):
    """Failed to connect to the server.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying exception that caused the connection failure.
    """

    def __init__(self, message: str, url: str | None = None, cause: Exception | None = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(ContentStoreClientError):
    """Request timed out.

    Attributes:
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(self, message: str, timeout: float | None = None, url: str | None = None) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        parts = []
        if self.timeout is not None:
            parts.append(f"timeout: {self.timeout}s")
        if self.url:
            parts.append(f"url: {self.url}")
        return f"{self.message} ({', '.join(parts)})" if parts else self.message


class APIError(ContentStoreClientError):
    """Server returned an error response.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the server.
        error_type: Error class from the response body, if any.
        condition: Store condition name (Unauthorized, NotFound, Conflict), if any.
        details: Additional error details from the response.
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        condition: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.condition = condition
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class ForbiddenError(APIError):
    """The caller lacks the required capability or ownership (HTTP 403).

    Raised for anonymous writes, deleting someone else's post or comment,
    and admin-only calls made by non-admins.
    """

    def __init__(self, message: str, condition: str | None = None, response_body: Any = None) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_type="forbidden",
            condition=condition,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """A referenced post, comment, profile or like-set does not exist (HTTP 404)."""

    def __init__(self, message: str, condition: str | None = None, response_body: Any = None) -> None:
        super().__init__(
            message=message,
            status_code=404,
            error_type="not_found",
            condition=condition,
            response_body=response_body,
        )


class ConflictError(APIError):
    """The call collides with current state (HTTP 409).

    Common cases:
    - Registering a username someone else holds
    - Liking a post twice, or unliking one you do not like
    - Following someone twice, following yourself, or unfollowing a stranger
    """

    def __init__(self, message: str, condition: str | None = None, response_body: Any = None) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_type="conflict",
            condition=condition,
            response_body=response_body,
        )


class ValidationError(APIError):
    """Request validation failed (HTTP 422).

    The details attribute holds the field-level errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None, response_body: Any = None) -> None:
        super().__init__(
            message=message,
            status_code=422,
            error_type="validation_error",
            details=details,
            response_body=response_body,
        )


class ServerError(APIError):
    """Server-side error (HTTP 5xx). Retried automatically when retry is enabled."""

    def __init__(self, message: str, status_code: int = 500, response_body: Any = None) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="server_error",
            response_body=response_body,
        )
