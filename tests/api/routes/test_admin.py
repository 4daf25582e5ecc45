"""Integration tests for roles, visual effects and store maintenance."""

from tests.api.helpers import ADMIN_HEADERS, ALICE_HEADERS, BOB_HEADERS, publish, register
from tests.fixtures.store import ALICE, BOB


class TestRoles:
    def test_role_lookup(self, client_with_store):
        client, _ = client_with_store

        assert client.get("/roles/me", headers=ADMIN_HEADERS).json() == {"role": "admin"}
        assert client.get("/roles/me", headers=ALICE_HEADERS).json() == {"role": "user"}
        assert client.get("/roles/me").json() == {"role": "guest"}
        assert client.get("/roles/me/admin", headers=ALICE_HEADERS).json() == {"value": False}

    def test_assign_role(self, client_with_store):
        client, store = client_with_store

        forbidden = client.post("/roles", json={"identity": BOB, "role": "admin"}, headers=ALICE_HEADERS)
        assert forbidden.status_code == 403

        response = client.post("/roles", json={"identity": BOB, "role": "admin"}, headers=ADMIN_HEADERS)
        assert response.status_code == 200
        assert store.is_caller_admin(BOB)

    def test_assign_to_anonymous_is_bad_request(self, client_with_store):
        client, _ = client_with_store
        response = client.post("/roles", json={"identity": "2vxsx-fae", "role": "user"}, headers=ADMIN_HEADERS)
        assert response.status_code == 400

    def test_unknown_role_rejected(self, client_with_store):
        client, _ = client_with_store
        response = client.post("/roles", json={"identity": BOB, "role": "owner"}, headers=ADMIN_HEADERS)
        assert response.status_code == 422


class TestEffects:
    def test_create_and_list(self, client_with_store):
        client, _ = client_with_store

        created = client.post(
            "/effects",
            json={"name": "glow", "effect_type": "filter", "intensity": 250, "preview_url": "p"},
            headers=ALICE_HEADERS,
        ).json()

        assert created["intensity"] == 50
        assert created["creator_identity"] == ALICE
        assert [e["name"] for e in client.get("/effects").json()] == ["glow"]

    def test_anonymous_effect_forbidden(self, client_with_store):
        client, _ = client_with_store
        response = client.post("/effects", json={"name": "x", "effect_type": "filter"})
        assert response.status_code == 403


class TestStoreMaintenance:
    def test_state_and_validate_are_admin_only(self, client_with_store):
        client, _ = client_with_store

        for path in ("/store/state", "/store/validate"):
            assert client.get(path, headers=ALICE_HEADERS).status_code == 403
        assert client.post("/store/clear", headers=BOB_HEADERS).status_code == 403

    def test_state_validate_clear(self, client_with_store):
        client, store = client_with_store
        register(client, ALICE)
        publish(client, ALICE)

        state = client.get("/store/state", headers=ADMIN_HEADERS).json()
        assert state["tables"]["posts"]["post_count"] == 1
        assert state["summary"]["profiles"] == "1 profiles"

        assert client.get("/store/validate", headers=ADMIN_HEADERS).json() == {"valid": True, "issues": []}

        assert client.post("/store/clear", headers=ADMIN_HEADERS).status_code == 200
        assert store.get_feed(0, 10) == []


class TestHealth:
    def test_health(self, client_with_store):
        client, _ = client_with_store
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
