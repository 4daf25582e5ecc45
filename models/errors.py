"""Error taxonomy for store operations.

Every rejected call raises a subclass of StoreError. The ``condition``
attribute names the failure class so outer layers (HTTP handlers, clients)
can map it without inspecting messages.
"""


class StoreError(Exception):
    """Base class for all rejected store operations.

    Args:
        reason: Human-readable explanation of why the call was rejected.
    """

    condition = "StoreError"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UnauthorizedError(StoreError):
    """Caller lacks the required capability or ownership."""

    condition = "Unauthorized"


class NotFoundError(StoreError):
    """A referenced entity (post, comment, profile, like-set) is absent."""

    condition = "NotFound"


class ConflictError(StoreError):
    """The call collides with existing state (duplicate username, already liked, ...)."""

    condition = "Conflict"
