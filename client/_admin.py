"""Administration sub-client for the Content Store API.

Covers roles (/roles/*), visual effects (/effects) and store maintenance
(/store/*). Store maintenance and role assignment need an admin identity.

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient
from client.models import (
    ActionResponse,
    FlagResponse,
    RoleResponse,
    StoreStateResponse,
    UserRole,
    ValidationReportResponse,
    VisualEffect,
)


def _effect_body(name: str, effect_type: str, intensity: int, preview_url: str) -> dict:
    return {"name": name, "effect_type": effect_type, "intensity": intensity, "preview_url": preview_url}


class AdminClient(BaseClient):
    """Synchronous client for role, effect and store maintenance endpoints.

    Example:
        with ContentStoreClient(identity="admin-id") as client:
            client.admin.assign_role("bob-id", UserRole.ADMIN)
            report = client.admin.validate_store()
            assert report.valid
    """

    # Roles

    def get_role(self) -> UserRole:
        """Get the caller's role (guest when anonymous)."""
        data = self._get("/roles/me")
        return RoleResponse(**data).role

    def is_admin(self) -> bool:
        data = self._get("/roles/me/admin")
        return FlagResponse(**data).value

    def assign_role(self, identity: str, role: UserRole | str) -> ActionResponse:
        """Assign a role to an identity.

        Raises:
            ForbiddenError: If the caller is not an admin.
            APIError: If the identity is the anonymous principal (HTTP 400).
        """
        data = self._post("/roles", json={"identity": identity, "role": UserRole(role).value})
        return ActionResponse(**data)

    # Visual effects

    def create_effect(self, name: str, effect_type: str, intensity: int = 50, preview_url: str = "") -> VisualEffect:
        """Create a visual effect preset.

        Intensities outside 0-100 are replaced by the server default.
        """
        data = self._post("/effects", json=_effect_body(name, effect_type, intensity, preview_url))
        return VisualEffect(**data)

    def effects(self) -> list[VisualEffect]:
        data = self._get("/effects")
        return [VisualEffect(**item) for item in data]

    # Store maintenance

    def get_store_state(self) -> StoreStateResponse:
        data = self._get("/store/state")
        return StoreStateResponse(**data)

    def validate_store(self) -> ValidationReportResponse:
        data = self._get("/store/validate")
        return ValidationReportResponse(**data)

    def clear_store(self) -> ActionResponse:
        data = self._post("/store/clear")
        return ActionResponse(**data)


class AsyncAdminClient(AsyncBaseClient):
    """Asynchronous client for role, effect and store maintenance endpoints."""

    async def get_role(self) -> UserRole:
        data = await self._get("/roles/me")
        return RoleResponse(**data).role

    async def is_admin(self) -> bool:
        data = await self._get("/roles/me/admin")
        return FlagResponse(**data).value

    async def assign_role(self, identity: str, role: UserRole | str) -> ActionResponse:
        data = await self._post("/roles", json={"identity": identity, "role": UserRole(role).value})
        return ActionResponse(**data)

    async def create_effect(
        self, name: str, effect_type: str, intensity: int = 50, preview_url: str = ""
    ) -> VisualEffect:
        data = await self._post("/effects", json=_effect_body(name, effect_type, intensity, preview_url))
        return VisualEffect(**data)

    async def effects(self) -> list[VisualEffect]:
        data = await self._get("/effects")
        return [VisualEffect(**item) for item in data]

    async def get_store_state(self) -> StoreStateResponse:
        data = await self._get("/store/state")
        return StoreStateResponse(**data)

    async def validate_store(self) -> ValidationReportResponse:
        data = await self._get("/store/validate")
        return ValidationReportResponse(**data)

    async def clear_store(self) -> ActionResponse:
        data = await self._post("/store/clear")
        return ActionResponse(**data)
