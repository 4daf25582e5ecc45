"""Internal HTTP handling utilities for the Content Store client.

This module provides the low-level HTTP layer used by all sub-clients:
- Making HTTP requests (sync and async) with the caller identity header
- Response parsing and error mapping
- Retry logic with exponential backoff

This is an internal module and should not be imported directly by users.
"""

import asyncio
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

DEFAULT_IDENTITY_HEADER = "X-Identity"

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, str | None, dict | None]:
    """Extract message, error type, store condition and details from an error response.

    Understands the server's store error body (``error``/``detail``/
    ``condition``) and FastAPI's request validation body (``detail`` list).
    Falls back to the raw text when the body is not JSON.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, condition, details).
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return (text or f"HTTP {response.status_code} error"), None, None, None

    if not isinstance(body, dict):
        return str(body), None, None, None

    detail = body.get("detail")
    if isinstance(detail, list):
        messages = [f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}" for err in detail]
        return "; ".join(messages), "validation_error", None, {"errors": detail}
    if isinstance(detail, str):
        return detail, body.get("error"), body.get("condition"), body.get("validation_errors")
    if "error" in body:
        return str(body["error"]), body.get("type"), body.get("condition"), None
    return str(body), None, None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the client exception matching an error status code.

    Raises:
        ForbiddenError: For HTTP 403 responses.
        NotFoundError: For HTTP 404 responses.
        ConflictError: For HTTP 409 responses.
        ValidationError: For HTTP 422 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, condition, details = _parse_error_response(response)
    status_code = response.status_code
    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    if status_code == 403:
        raise ForbiddenError(message=message, condition=condition, response_body=response_body)
    if status_code == 404:
        raise NotFoundError(message=message, condition=condition, response_body=response_body)
    if status_code == 409:
        raise ConflictError(message=message, condition=condition, response_body=response_body)
    if status_code == 422:
        raise ValidationError(message=message, details=details, response_body=response_body)
    if status_code >= 500:
        raise ServerError(message=message, status_code=status_code, response_body=response_body)
    raise APIError(
        message=message,
        status_code=status_code,
        error_type=error_type,
        condition=condition,
        details=details,
        response_body=response_body,
    )


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Exponential backoff delay (base * 2^attempt), capped at DEFAULT_RETRY_BACKOFF_MAX."""
    return min(base * (2**attempt), DEFAULT_RETRY_BACKOFF_MAX)


def _identity_headers(identity: str | None, identity_header: str) -> dict[str, str]:
    return {identity_header: identity} if identity else {}


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return params
    return {k: v for k, v in params.items() if v is not None}


def _decode(response: httpx.Response) -> Any:
    _raise_for_status(response)
    if response.content:
        return response.json()
    return None


class HTTPClient:
    """Synchronous HTTP client for making API requests.

    Wraps httpx.Client with the caller identity header, error mapping and
    retry logic.

    Attributes:
        base_url: The base URL for all API requests.
        identity: Identity sent with every request (None for anonymous).
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        identity: str | None = None,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
        identity_header: str = DEFAULT_IDENTITY_HEADER,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.identity = identity
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers=_identity_headers(identity, identity_header),
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method (GET, POST, etc.).
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            last_attempt = attempt >= attempts - 1
            try:
                response = self._client.request(method=method, url=path, params=params, json=json)
            except httpx.ConnectError as e:
                if not self.retry_enabled or last_attempt:
                    raise ConnectionError(message=f"Failed to connect to {url}", url=url, cause=e) from e
            except httpx.TimeoutException as e:
                if not self.retry_enabled or last_attempt:
                    raise TimeoutError(
                        message=f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
            else:
                if not (self.retry_enabled and response.status_code in RETRYABLE_STATUS_CODES and not last_attempt):
                    return _decode(response)
            time.sleep(_calculate_backoff(attempt))

        raise RuntimeError("Unexpected error in request retry loop")

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: dict[str, Any] | None = None, params: dict[str, Any] | None = None) -> Any:
        return self.request("POST", path, params=params, json=json)

    def put(self, path: str, json: dict[str, Any] | None = None, params: dict[str, Any] | None = None) -> Any:
        return self.request("PUT", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)


class AsyncHTTPClient:
    """Asynchronous HTTP client for making API requests.

    Async twin of HTTPClient, wrapping httpx.AsyncClient.
    """

    def __init__(
        self,
        base_url: str,
        identity: str | None = None,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
        identity_header: str = DEFAULT_IDENTITY_HEADER,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.identity = identity
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers=_identity_headers(identity, identity_header),
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async HTTP request and return the parsed JSON response.

        See HTTPClient.request for arguments and errors.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            last_attempt = attempt >= attempts - 1
            try:
                response = await self._client.request(method=method, url=path, params=params, json=json)
            except httpx.ConnectError as e:
                if not self.retry_enabled or last_attempt:
                    raise ConnectionError(message=f"Failed to connect to {url}", url=url, cause=e) from e
            except httpx.TimeoutException as e:
                if not self.retry_enabled or last_attempt:
                    raise TimeoutError(
                        message=f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
            else:
                if not (self.retry_enabled and response.status_code in RETRYABLE_STATUS_CODES and not last_attempt):
                    return _decode(response)
            await asyncio.sleep(_calculate_backoff(attempt))

        raise RuntimeError("Unexpected error in request retry loop")

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self, path: str, json: dict[str, Any] | None = None, params: dict[str, Any] | None = None
    ) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def put(
        self, path: str, json: dict[str, Any] | None = None, params: dict[str, Any] | None = None
    ) -> Any:
        return await self.request("PUT", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, params=params)
