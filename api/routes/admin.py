"""Role and store administration endpoints.

Role lookups answer for the caller. Role assignment, the full store dump
and store clearing are limited to admins.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import CallerDep, ContentStoreDep
from api.models import ActionResponse, FlagResponse, StoreStateResponse, ValidationReportResponse
from models.entities import UserRole

router = APIRouter(tags=["admin"])


class RoleResponse(BaseModel):
    role: UserRole


class AssignRoleRequest(BaseModel):
    """Request model for assigning a role.

    Attributes:
        identity: Identity receiving the role.
        role: Role to assign.
    """

    identity: str = Field(min_length=1, description="Identity receiving the role")
    role: UserRole = Field(description="Role to assign")


# ============================================================================
# Roles
# ============================================================================


@router.get("/roles/me", response_model=RoleResponse)
async def get_caller_role(store: ContentStoreDep, caller: CallerDep) -> RoleResponse:
    """Get the caller's effective role (guest when anonymous)."""
    return RoleResponse(role=store.get_caller_role(caller))


@router.get("/roles/me/admin", response_model=FlagResponse)
async def is_caller_admin(store: ContentStoreDep, caller: CallerDep) -> FlagResponse:
    return FlagResponse(value=store.is_caller_admin(caller))


@router.post("/roles", response_model=ActionResponse)
async def assign_role(request: AssignRoleRequest, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Assign a role to an identity (admin only)."""
    store.assign_role(caller, request.identity, request.role)
    return ActionResponse(message=f"Assigned {request.role.value} to {request.identity}")


# ============================================================================
# Store maintenance
# ============================================================================


@router.get("/store/state", response_model=StoreStateResponse)
async def get_store_state(store: ContentStoreDep, caller: CallerDep) -> StoreStateResponse:
    """Dump every table (admin only)."""
    return StoreStateResponse(**store.dump_store(caller))


@router.get("/store/validate", response_model=ValidationReportResponse)
async def validate_store(store: ContentStoreDep, caller: CallerDep) -> ValidationReportResponse:
    """Run the store's consistency checks (admin only)."""
    issues = store.check_store(caller)
    return ValidationReportResponse(valid=not issues, issues=issues)


@router.post("/store/clear", response_model=ActionResponse)
async def clear_store(store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Empty every table and restart ids at 1 (admin only)."""
    store.reset_store(caller)
    return ActionResponse(message="Store cleared")
