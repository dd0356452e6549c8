"""The remote catalog the fetcher reads from.

``SmartThingsClient`` implements this protocol; tests substitute in-memory
fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from stgen.model import CapabilityDefinition, Device, Location, LocationRef, Room, Scene


@runtime_checkable
class RemoteSource(Protocol):
    """Read access to devices, scenes, locations, rooms and capabilities."""

    async def list_devices(self) -> list[Device]: ...

    async def list_scenes(self) -> list[Scene]: ...

    async def list_location_refs(self) -> list[LocationRef]: ...

    async def get_location(self, location_id: str) -> Location: ...

    async def list_rooms(self, location_id: str) -> list[Room]: ...

    async def get_capability(self, capability_id: str, version: int) -> CapabilityDefinition: ...
