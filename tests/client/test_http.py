"""Unit tests for the client HTTP utilities in client/_http.py.

Covers error body parsing, status-to-exception mapping, the identity
header, query parameter filtering and retry behaviour. httpx's
MockTransport stands in for the server.
"""

import httpx
import pytest

from client._http import (
    DEFAULT_RETRY_BACKOFF_MAX,
    AsyncHTTPClient,
    HTTPClient,
    _calculate_backoff,
    _parse_error_response,
    _raise_for_status,
)
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


# =============================================================================
# _parse_error_response
# =============================================================================


class TestParseErrorResponse:
    def test_store_error_body(self):
        response = httpx.Response(
            409, json={"error": "Conflict", "detail": "Post 1 is already liked", "condition": "Conflict"}
        )
        message, error_type, condition, details = _parse_error_response(response)

        assert message == "Post 1 is already liked"
        assert error_type == "Conflict"
        assert condition == "Conflict"
        assert details is None

    def test_request_validation_body(self):
        response = httpx.Response(
            422,
            json={"detail": [{"loc": ["body", "username"], "msg": "too short", "type": "string_too_short"}]},
        )
        message, error_type, condition, details = _parse_error_response(response)

        assert message == "username: too short"
        assert error_type == "validation_error"
        assert condition is None
        assert details["errors"][0]["type"] == "string_too_short"

    def test_plain_text_body(self):
        response = httpx.Response(502, text="Bad Gateway")
        assert _parse_error_response(response)[0] == "Bad Gateway"

    def test_empty_body(self):
        assert _parse_error_response(httpx.Response(500))[0] == "HTTP 500 error"


# =============================================================================
# _raise_for_status
# =============================================================================


class TestRaiseForStatus:
    def test_success_does_nothing(self):
        _raise_for_status(httpx.Response(200, json={}))

    @pytest.mark.parametrize(
        "status_code,exc_type",
        [
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, ConflictError),
            (422, ValidationError),
            (500, ServerError),
            (503, ServerError),
            (400, APIError),
        ],
    )
    def test_mapping(self, status_code, exc_type):
        response = httpx.Response(status_code, json={"error": "x", "detail": "boom", "condition": "Cond"})
        with pytest.raises(exc_type) as exc_info:
            _raise_for_status(response)
        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == "boom"

    def test_condition_carried(self):
        response = httpx.Response(
            403, json={"error": "Unauthorized", "detail": "Only admins", "condition": "Unauthorized"}
        )
        with pytest.raises(ForbiddenError) as exc_info:
            _raise_for_status(response)
        assert exc_info.value.condition == "Unauthorized"
        assert exc_info.value.response_body["detail"] == "Only admins"


class TestCalculateBackoff:
    def test_exponential(self):
        assert _calculate_backoff(0, base=1.0) == 1.0
        assert _calculate_backoff(3, base=1.0) == 8.0

    def test_capped(self):
        assert _calculate_backoff(50) == DEFAULT_RETRY_BACKOFF_MAX


# =============================================================================
# HTTPClient
# =============================================================================


class TestHTTPClient:
    def test_identity_header_sent(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["identity"] = request.headers.get("X-Identity")
            return httpx.Response(200, json={"ok": True})

        with HTTPClient("http://test", identity="alice-id", transport=httpx.MockTransport(handler)) as http:
            assert http.get("/profiles/me") == {"ok": True}
        assert seen["identity"] == "alice-id"

    def test_anonymous_sends_no_identity(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["has_identity"] = "X-Identity" in request.headers
            return httpx.Response(200, json=None)

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as http:
            http.get("/posts/1")
        assert seen["has_identity"] is False

    def test_custom_identity_header(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["principal"] = request.headers.get("X-Principal")
            return httpx.Response(200, json={})

        transport = httpx.MockTransport(handler)
        with HTTPClient("http://test", identity="bob-id", transport=transport, identity_header="X-Principal") as http:
            http.get("/roles/me")
        assert seen["principal"] == "bob-id"

    def test_none_params_dropped(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={})

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as http:
            http.get("/posts/feed", params={"page": 0, "page_size": None})
        assert seen["params"] == {"page": "0"}

    def test_empty_response_is_none(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(204))
        with HTTPClient("http://test", transport=transport) as http:
            assert http.delete("/posts/1") is None

    def test_error_raised(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(404, json={"error": "Not Found", "detail": "Post 9 not found"})
        )
        with HTTPClient("http://test", transport=transport) as http:
            with pytest.raises(NotFoundError):
                http.get("/posts/9/like")

    def test_connect_error_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(ConnectionError) as exc_info:
                http.get("/health")
        assert exc_info.value.url == "http://test/health"

    def test_timeout_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with HTTPClient("http://test", timeout=2.0, transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(TimeoutError) as exc_info:
                http.get("/health")
        assert exc_info.value.timeout == 2.0

    def test_retry_on_unavailable(self, monkeypatch):
        monkeypatch.setattr("client._http.time.sleep", lambda seconds: None)
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            if len(calls) < 3:
                return httpx.Response(503, text="busy")
            return httpx.Response(200, json={"status": "healthy"})

        transport = httpx.MockTransport(handler)
        with HTTPClient("http://test", retry_enabled=True, max_retries=3, transport=transport) as http:
            assert http.get("/health") == {"status": "healthy"}
        assert len(calls) == 3

    def test_retry_gives_up(self, monkeypatch):
        monkeypatch.setattr("client._http.time.sleep", lambda seconds: None)
        transport = httpx.MockTransport(lambda request: httpx.Response(503, text="busy"))

        with HTTPClient("http://test", retry_enabled=True, max_retries=2, transport=transport) as http:
            with pytest.raises(ServerError):
                http.get("/health")

    def test_no_retry_on_conflict(self, monkeypatch):
        monkeypatch.setattr("client._http.time.sleep", lambda seconds: None)
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            return httpx.Response(409, json={"error": "Conflict", "detail": "again", "condition": "Conflict"})

        with HTTPClient("http://test", retry_enabled=True, transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(ConflictError):
                http.post("/posts/1/like")
        assert len(calls) == 1


# =============================================================================
# AsyncHTTPClient
# =============================================================================


class TestAsyncHTTPClient:
    async def test_identity_and_json(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["identity"] = request.headers.get("X-Identity")
            seen["body"] = request.content
            return httpx.Response(200, json={"id": 1})

        transport = httpx.MockTransport(handler)
        async with AsyncHTTPClient("http://test", identity="alice-id", transport=transport) as http:
            result = await http.post("/posts/1/comments", json={"text": "hi"})

        assert result == {"id": 1}
        assert seen["identity"] == "alice-id"
        assert b'"text"' in seen["body"]

    async def test_forbidden(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(403, json={"error": "Unauthorized", "detail": "no", "condition": "Unauthorized"})
        )
        async with AsyncHTTPClient("http://test", transport=transport) as http:
            with pytest.raises(ForbiddenError):
                await http.post("/posts")

    async def test_retry(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            return httpx.Response(502 if len(calls) == 1 else 200, json={})

        transport = httpx.MockTransport(handler)
        async with AsyncHTTPClient("http://test", retry_enabled=True, transport=transport) as http:
            await http.get("/health")
        assert len(calls) == 2
