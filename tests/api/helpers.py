"""Helper functions for API route tests.

Requests identify their caller through the X-Identity header; these
helpers build those headers and drive common setup through the API.
"""

from typing import Any

from fastapi.testclient import TestClient

from tests.fixtures.store import ADMIN, ALICE, BOB, CAROL


def as_user(identity: str) -> dict[str, str]:
    """Headers that make a request on behalf of ``identity``."""
    return {"X-Identity": identity}


ADMIN_HEADERS = as_user(ADMIN)
ALICE_HEADERS = as_user(ALICE)
BOB_HEADERS = as_user(BOB)
CAROL_HEADERS = as_user(CAROL)


def register(client: TestClient, identity: str, username: str | None = None, bio: str = "") -> dict[str, Any]:
    """Register ``identity`` through the API and return the profile JSON."""
    response = client.post(
        "/profiles/register",
        json={"username": username or identity.removesuffix("-id"), "bio": bio},
        headers=as_user(identity),
    )
    assert response.status_code == 200, response.json()
    return response.json()


def publish(
    client: TestClient,
    identity: str,
    caption: str = "hello",
    hashtags: list[str] | None = None,
    media_type: str = "photo",
) -> int:
    """Create a post through the API and return its id."""
    response = client.post(
        "/posts",
        json={"media": f"blob-{identity}", "media_type": media_type, "caption": caption, "hashtags": hashtags},
        headers=as_user(identity),
    )
    assert response.status_code == 200, response.json()
    return response.json()["id"]
