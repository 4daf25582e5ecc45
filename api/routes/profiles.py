"""Profile endpoints.

Provides registration, profile lookups and profile edits. Every endpoint
here needs an authenticated caller identity.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import CallerDep, ContentStoreDep
from models.entities import UserProfile

router = APIRouter(
    prefix="/profiles",
    tags=["profiles"],
)


# ============================================================================
# Request Models
# ============================================================================


class RegisterRequest(BaseModel):
    """Request model for registering the caller's profile.

    Attributes:
        username: Requested handle, unique across the store.
        bio: Profile text.
        avatar: Optional external blob handle for the profile picture.
    """

    username: str = Field(min_length=1, description="Requested handle")
    bio: str = Field(default="", description="Profile text")
    avatar: str | None = Field(default=None, description="External blob handle for the avatar")


class UpdateProfileRequest(BaseModel):
    """Request model for editing the caller's profile.

    Attributes:
        username: New handle (may equal the current one).
        bio: New profile text.
        avatar: New avatar handle, or None to remove it.
    """

    username: str = Field(min_length=1, description="New handle")
    bio: str = Field(default="", description="New profile text")
    avatar: str | None = Field(default=None, description="New avatar handle")


# ============================================================================
# Route Handlers
# ============================================================================


@router.get("/me", response_model=UserProfile | None)
async def get_own_profile(store: ContentStoreDep, caller: CallerDep) -> UserProfile | None:
    """Get the caller's own profile.

    Returns null if the caller has not registered yet.
    """
    return store.get_own_profile(caller)


@router.post("/register", response_model=UserProfile)
async def register(request: RegisterRequest, store: ContentStoreDep, caller: CallerDep) -> UserProfile:
    """Register a profile for the caller.

    Args:
        request: Username, bio and avatar.
        store: The content store dependency.
        caller: Caller identity from the identity header.

    Returns:
        The new profile with every counter at zero.
    """
    return store.register(caller, request.username, request.bio, request.avatar)


@router.put("/me", response_model=UserProfile)
async def update_profile(
    request: UpdateProfileRequest, store: ContentStoreDep, caller: CallerDep
) -> UserProfile:
    """Edit the caller's username, bio and avatar.

    Counters and the registration time are preserved.
    """
    return store.update_profile(caller, request.username, request.bio, request.avatar)


@router.put("/me/full", response_model=UserProfile)
async def save_profile(profile: UserProfile, store: ContentStoreDep, caller: CallerDep) -> UserProfile:
    """Overwrite the caller's full profile record.

    The identity in the body is ignored; the stored profile always belongs
    to the caller.
    """
    return store.save_profile(caller, profile)


@router.get("/{identity}", response_model=UserProfile | None)
async def get_profile(identity: str, store: ContentStoreDep, caller: CallerDep) -> UserProfile | None:
    """Get any identity's profile, or null if it never registered."""
    return store.get_profile(caller, identity)
