"""The complete catalog fetched in one generation run."""

from __future__ import annotations

from pydantic import BaseModel

from .capability import CapabilityDefinition, CapabilityRef
from .device import Device
from .location import Location, Room
from .scene import Scene


# capability id -> version -> definition
CapabilityCatalog = dict[str, dict[int, CapabilityDefinition]]


class CatalogSnapshot(BaseModel):
    """Read-only snapshot of everything the emitter needs.

    List ordering is whatever the fetch produced; the emitter imposes its
    own order.
    """

    devices: list[Device] = []
    capabilities: CapabilityCatalog = {}
    scenes: list[Scene] = []
    rooms: list[Room] = []
    locations: list[Location] = []

    def capability(self, capability_id: str, version: int) -> CapabilityDefinition | None:
        return self.capabilities.get(capability_id, {}).get(version)

    def capability_refs(self) -> list[CapabilityRef]:
        """Every capability reference in the device graph, duplicates included."""
        return [
            ref
            for device in self.devices
            for component in device.components
            for ref in component.capabilities
        ]

    def missing_capabilities(self) -> list[tuple[str, int]]:
        """Distinct referenced ``(id, version)`` pairs with no definition, sorted."""
        missing = {
            ref.key for ref in self.capability_refs()
            if self.capability(ref.id, ref.version) is None
        }
        return sorted(missing)
