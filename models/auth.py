"""Authorization boundary for the store.

The store never authenticates anyone. It receives an identity per call and
asks an AuthorizationProvider whether that identity holds a role.
RoleRegistry is the in-process provider used by the HTTP service.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from models.entities import UserRole

logger = logging.getLogger(__name__)

# Roles that satisfy each capability check
_CAPABILITY_GRANTS: dict[UserRole, set[UserRole]] = {
    UserRole.ADMIN: {UserRole.ADMIN},
    UserRole.USER: {UserRole.ADMIN, UserRole.USER},
    UserRole.GUEST: {UserRole.ADMIN, UserRole.USER, UserRole.GUEST},
}


class AuthorizationProvider(ABC):
    """Predicates the store consults before mutating state."""

    @abstractmethod
    def has_capability(self, identity: Optional[str], role: UserRole) -> bool:
        """Return True if ``identity`` holds at least ``role``."""

    @abstractmethod
    def is_admin(self, identity: Optional[str]) -> bool:
        """Return True if ``identity`` is an administrator."""


class RoleRegistry(AuthorizationProvider):
    """In-memory role assignments keyed by identity.

    Anonymous callers are guests. Any other identity is a plain user until
    an administrator assigns it a different role.

    Args:
        anonymous_identity: Identity string the upstream proxy uses for
            unauthenticated callers.
        admin_identities: Identities granted the admin role up front.
    """

    def __init__(self, anonymous_identity: str = "2vxsx-fae", admin_identities: Iterable[str] = ()):
        self.anonymous_identity = anonymous_identity
        self._roles: dict[str, UserRole] = {}
        for identity in admin_identities:
            self._roles[identity] = UserRole.ADMIN

    def is_anonymous(self, identity: Optional[str]) -> bool:
        """Return True for missing, blank or anonymous identities."""
        return not identity or identity == self.anonymous_identity

    def get_role(self, identity: Optional[str]) -> UserRole:
        """Return the effective role of an identity."""
        if self.is_anonymous(identity):
            return UserRole.GUEST
        return self._roles.get(identity, UserRole.USER)

    def assign_role(self, identity: str, role: UserRole) -> None:
        """Assign a role to a non-anonymous identity.

        Raises:
            ValueError: If the identity is anonymous.
        """
        if self.is_anonymous(identity):
            raise ValueError("Cannot assign a role to the anonymous identity")
        self._roles[identity] = role
        logger.info(f"Assigned role {role.value} to {identity}")

    def has_capability(self, identity: Optional[str], role: UserRole) -> bool:
        return self.get_role(identity) in _CAPABILITY_GRANTS[role]

    def is_admin(self, identity: Optional[str]) -> bool:
        return self.get_role(identity) == UserRole.ADMIN
