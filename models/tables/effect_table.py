"""Visual effect catalog."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from models.base_table import StoreTable
from models.entities import VisualEffect


class EffectTable(StoreTable):
    """Visual effects in creation order."""

    table_name: str = Field(default="effects", frozen=True)
    effects: list[VisualEffect] = Field(default_factory=list)

    def add(self, effect: VisualEffect, timestamp: datetime) -> None:
        self.effects.append(effect)
        self.touch(timestamp)

    def get_snapshot(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
            "effects": [e.model_dump(mode="json") for e in self.effects],
        }

    def validate_state(self) -> list[str]:
        return [
            f"Effect {e.name!r} has intensity {e.intensity} outside 0..100"
            for e in self.effects
            if not 0 <= e.intensity <= 100
        ]

    def clear(self) -> None:
        self.effects.clear()
        self.update_count = 0

    @property
    def summary(self) -> str:
        return f"{len(self.effects)} visual effects"
