"""Scenes."""

from __future__ import annotations

from typing import Any

from ._wire import WireModel


# Wire keys that change every time a scene is edited or run.
VOLATILE_FIELDS = ("createdDate", "lastUpdatedDate", "lastExecutedDate")


class Scene(WireModel):
    scene_id: str
    scene_name: str | None = None
    location_id: str | None = None
    created_date: Any = None
    last_updated_date: Any = None
    last_executed_date: Any = None

    @property
    def display_name(self) -> str:
        return self.scene_name or self.scene_id

    def stable_dump(self) -> dict[str, Any]:
        """Wire form without timestamps, so generated output does not churn."""
        data = self.raw()
        for key in VOLATILE_FIELDS:
            data.pop(key, None)
        return data
