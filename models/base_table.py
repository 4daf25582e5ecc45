"""Base class for all store tables."""

from abc import abstractmethod
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class StoreTable(BaseModel):
    """Base class for one table (or derived index) owned by the ContentStore.

    Tables are mutable containers modified in-place by the store. They never
    check permissions; the store validates a call completely before asking
    a table to mutate, so a table method either succeeds or was never
    called.

    Args:
        table_name: Identifies which table this is.
        last_updated: When this table was last modified.
        update_count: Number of times this table has been modified.
    """

    table_name: str = Field(description="Identifies which table this is")
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When this table was last modified",
    )
    update_count: int = Field(default=0, description="Number of times this table has been modified")

    def touch(self, timestamp: datetime) -> None:
        """Record a modification at the given time.

        Args:
            timestamp: Time of the modification.
        """
        self.last_updated = timestamp
        self.update_count += 1

    @abstractmethod
    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of this table.

        Returns:
            Dictionary representation of the table contents.
        """

    @abstractmethod
    def validate_state(self) -> list[str]:
        """Check internal consistency and return any issues.

        Cross-table invariants (counters vs relation sizes) are checked by
        the store itself; this only covers what the table can see alone.

        Returns:
            List of validation error messages (empty list if valid).
        """

    @abstractmethod
    def clear(self) -> None:
        """Reset this table to its empty default, including id counters."""

    @property
    def summary(self) -> str:
        """Return a brief human-readable summary of this table.

        Subclasses override this to give counts meaningful to their data.
        """
        return f"{self.table_name} table"
