"""Unit tests for API error handling.

Store errors must reach clients as consistent JSON bodies carrying the
condition name, with the status code matching the condition.
"""

import asyncio
import json
from unittest.mock import MagicMock

import pytest
from fastapi import status

from api.exceptions import (
    conflict_handler,
    generic_exception_handler,
    not_found_handler,
    runtime_error_handler,
    store_error_handler,
    unauthorized_handler,
    value_error_handler,
)
from api.models import ErrorResponse
from models.errors import ConflictError, NotFoundError, StoreError, UnauthorizedError


def run_async(coro):
    """Run an async handler synchronously."""
    return asyncio.run(coro)


def body_of(response) -> dict:
    return json.loads(response.body)


class TestStoreErrors:
    def test_conditions(self):
        assert UnauthorizedError("x").condition == "Unauthorized"
        assert NotFoundError("x").condition == "NotFound"
        assert ConflictError("x").condition == "Conflict"

    def test_reason_is_message(self):
        error = ConflictError("Username 'alice' is already taken")
        assert error.reason == "Username 'alice' is already taken"
        assert str(error) == "Username 'alice' is already taken"

    def test_subclasses_share_base(self):
        for cls in (UnauthorizedError, NotFoundError, ConflictError):
            assert issubclass(cls, StoreError)


class TestStoreErrorHandlers:
    @pytest.mark.parametrize(
        "handler,error,status_code,condition",
        [
            (unauthorized_handler, UnauthorizedError("nope"), status.HTTP_403_FORBIDDEN, "Unauthorized"),
            (not_found_handler, NotFoundError("gone"), status.HTTP_404_NOT_FOUND, "NotFound"),
            (conflict_handler, ConflictError("again"), status.HTTP_409_CONFLICT, "Conflict"),
        ],
    )
    def test_status_and_body(self, handler, error, status_code, condition):
        response = run_async(handler(MagicMock(), error))

        assert response.status_code == status_code
        body = body_of(response)
        assert body["condition"] == condition
        assert body["detail"] == error.reason
        ErrorResponse(**body)

    def test_generic_store_error_is_bad_request(self):
        response = run_async(store_error_handler(MagicMock(), StoreError("odd")))
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestFallbackHandlers:
    def test_value_error(self):
        response = run_async(value_error_handler(MagicMock(), ValueError("bad media type")))
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert body_of(response)["detail"] == "bad media type"

    def test_runtime_error(self):
        response = run_async(runtime_error_handler(MagicMock(), RuntimeError("store missing")))
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_generic_exception_hides_details(self):
        response = run_async(generic_exception_handler(MagicMock(), KeyError("secret")))
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "secret" not in response.body.decode()
