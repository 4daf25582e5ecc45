"""Profile sub-client for the Content Store API.

This module provides ProfilesClient and AsyncProfilesClient for the
profile endpoints (/profiles/*). Every call acts as the identity the
top-level client was built with.

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient, _segment
from client.models import UserProfile


class ProfilesClient(BaseClient):
    """Synchronous client for profile endpoints (/profiles/*).

    Example:
        with ContentStoreClient(identity="alice-id") as client:
            client.profiles.register(username="alice", bio="hi")
            me = client.profiles.get_own()
            print(me.followers_count)
    """

    _BASE_PATH = "/profiles"

    def get_own(self) -> UserProfile | None:
        """Get the caller's profile, or None when not registered.

        Raises:
            ForbiddenError: If the client is anonymous.
        """
        data = self._get(f"{self._BASE_PATH}/me")
        return UserProfile(**data) if data else None

    def get(self, identity: str) -> UserProfile | None:
        """Get another user's profile, or None when it does not exist."""
        data = self._get(f"{self._BASE_PATH}/{_segment(identity)}")
        return UserProfile(**data) if data else None

    def register(self, username: str, bio: str = "", avatar: str | None = None) -> UserProfile:
        """Create the caller's profile.

        Args:
            username: Requested handle, unique across the store.
            bio: Profile text.
            avatar: Optional blob handle for the profile picture.

        Returns:
            The new profile with all counters at zero.

        Raises:
            ForbiddenError: If the client is anonymous.
            ConflictError: If the username is taken or the caller already
                has a profile.
        """
        data = self._post(
            f"{self._BASE_PATH}/register",
            json={"username": username, "bio": bio, "avatar": avatar},
        )
        return UserProfile(**data)

    def update(self, username: str, bio: str = "", avatar: str | None = None) -> UserProfile:
        """Edit the caller's handle, bio and avatar. Counters are kept.

        Raises:
            NotFoundError: If the caller has no profile.
            ConflictError: If the username belongs to someone else.
        """
        data = self._put(
            f"{self._BASE_PATH}/me",
            json={"username": username, "bio": bio, "avatar": avatar},
        )
        return UserProfile(**data)

    def save(self, profile: UserProfile) -> UserProfile:
        """Store a full profile record for the caller, counters included."""
        data = self._put(f"{self._BASE_PATH}/me/full", json=profile.model_dump(mode="json"))
        return UserProfile(**data)


class AsyncProfilesClient(AsyncBaseClient):
    """Asynchronous client for profile endpoints (/profiles/*).

    Example:
        async with AsyncContentStoreClient(identity="alice-id") as client:
            await client.profiles.register(username="alice")
    """

    _BASE_PATH = "/profiles"

    async def get_own(self) -> UserProfile | None:
        data = await self._get(f"{self._BASE_PATH}/me")
        return UserProfile(**data) if data else None

    async def get(self, identity: str) -> UserProfile | None:
        data = await self._get(f"{self._BASE_PATH}/{_segment(identity)}")
        return UserProfile(**data) if data else None

    async def register(self, username: str, bio: str = "", avatar: str | None = None) -> UserProfile:
        data = await self._post(
            f"{self._BASE_PATH}/register",
            json={"username": username, "bio": bio, "avatar": avatar},
        )
        return UserProfile(**data)

    async def update(self, username: str, bio: str = "", avatar: str | None = None) -> UserProfile:
        data = await self._put(
            f"{self._BASE_PATH}/me",
            json={"username": username, "bio": bio, "avatar": avatar},
        )
        return UserProfile(**data)

    async def save(self, profile: UserProfile) -> UserProfile:
        data = await self._put(f"{self._BASE_PATH}/me/full", json=profile.model_dump(mode="json"))
        return UserProfile(**data)
