"""Devices and their components."""

from __future__ import annotations

from ._wire import WireModel
from .capability import CapabilityRef


class Component(WireModel):
    id: str
    label: str | None = None
    capabilities: list[CapabilityRef] = []


class Device(WireModel):
    device_id: str
    label: str | None = None
    name: str | None = None
    location_id: str | None = None
    room_id: str | None = None
    components: list[Component] = []

    @property
    def display_label(self) -> str:
        """The user-facing label, falling back to the device name and id."""
        return self.label or self.name or self.device_id
