"""Unit tests for API dependency injection.

Covers the shared ContentStore lifecycle, caller identity extraction and
pagination normalization in api/dependencies.py.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import api.dependencies as deps
from api.dependencies import (
    CallerDep,
    PageDep,
    get_content_store,
    initialize_content_store,
    shutdown_content_store,
)
from config import Settings, get_settings
from models.entities import UserRole
from models.store import ContentStore


@pytest.fixture(autouse=True)
def reset_global_store():
    """Reset the global store before and after each test."""
    original = deps._content_store
    deps._content_store = None
    yield
    deps._content_store = original


class TestContentStoreLifecycle:
    def test_get_before_initialize_raises(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_content_store()

    def test_initialize_uses_settings(self):
        settings = Settings(admin_identities="root, ops ,", trending_posts_limit=3, default_effect_intensity=10)

        store = initialize_content_store(settings)

        assert isinstance(store, ContentStore)
        assert get_content_store() is store
        assert store.trending_posts_limit == 3
        assert store.default_effect_intensity == 10
        assert store.get_caller_role("root") == UserRole.ADMIN
        assert store.get_caller_role("ops") == UserRole.ADMIN

    def test_shutdown_clears_store(self):
        initialize_content_store(Settings())
        shutdown_content_store()
        with pytest.raises(RuntimeError):
            get_content_store()


def _probe_app(settings: Settings) -> TestClient:
    app = FastAPI()

    @app.get("/probe")
    async def probe(caller: CallerDep, paging: PageDep):
        return {"caller": caller, "page": paging.page, "page_size": paging.page_size}

    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


class TestCallerAndPaging:
    def test_caller_from_header(self):
        client = _probe_app(Settings())
        assert client.get("/probe", headers={"X-Identity": "alice-id"}).json()["caller"] == "alice-id"
        assert client.get("/probe").json()["caller"] is None

    def test_custom_identity_header(self):
        client = _probe_app(Settings(identity_header="X-Principal"))
        response = client.get("/probe", headers={"X-Principal": "bob-id", "X-Identity": "alice-id"})
        assert response.json()["caller"] == "bob-id"

    def test_page_size_defaults(self):
        client = _probe_app(Settings(default_page_size=7, max_page_size=50))

        assert client.get("/probe").json()["page_size"] == 7
        assert client.get("/probe", params={"page_size": 50}).json()["page_size"] == 50
        assert client.get("/probe", params={"page": 3, "page_size": 0}).json() == {
            "caller": None,
            "page": 3,
            "page_size": 0,
        }

    def test_negative_values_rejected(self):
        client = _probe_app(Settings())
        assert client.get("/probe", params={"page": -1}).status_code == 422
        assert client.get("/probe", params={"page_size": -5}).status_code == 422

    def test_oversized_page_rejected_not_shrunk(self):
        client = _probe_app(Settings(max_page_size=50))

        response = client.get("/probe", params={"page": 1, "page_size": 51})

        assert response.status_code == 422
        error = response.json()["detail"][0]
        assert error["loc"] == ["query", "page_size"]
        assert error["ctx"] == {"le": 50}


class TestSettings:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CONTENT_STORE_MAX_PAGE_SIZE", "12")
        monkeypatch.setenv("CONTENT_STORE_ADMIN_IDENTITIES", "a,b")

        settings = Settings()

        assert settings.max_page_size == 12
        assert settings.admin_identity_list == ["a", "b"]

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.identity_header == "X-Identity"
        assert settings.anonymous_identity == "2vxsx-fae"
        assert settings.viral_engagement_threshold == 5.0
