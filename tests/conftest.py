"""Shared test helpers for the stgen test suite."""

import asyncio
import copy

from stgen.model import (
    CapabilityDefinition,
    CatalogSnapshot,
    Device,
    Location,
    LocationRef,
    Room,
    Scene,
)


SWITCH = {
    "id": "switch",
    "version": 1,
    "name": "Switch",
    "status": "live",
    "attributes": {
        "switch": {
            "schema": {
                "type": "object",
                "properties": {"value": {"type": "string", "enum": ["on", "off"]}},
                "additionalProperties": False,
                "required": ["value"],
            },
            "enumCommands": [
                {"command": "on", "value": "on"},
                {"command": "off", "value": "off"},
            ],
        }
    },
    "commands": {
        "off": {"name": "off", "arguments": []},
        "on": {"name": "on", "arguments": []},
    },
}

SWITCH_LEVEL = {
    "id": "switchLevel",
    "version": 1,
    "name": "Switch Level",
    "status": "live",
    "attributes": {
        "level": {
            "schema": {
                "type": "object",
                "properties": {
                    "value": {"type": "integer", "minimum": 0, "maximum": 100},
                    "unit": {"type": "string", "enum": ["%"], "default": "%"},
                },
                "required": ["value"],
            }
        }
    },
    "commands": {
        "setLevel": {
            "name": "setLevel",
            "arguments": [
                {"name": "level", "optional": False, "schema": {"type": "integer", "minimum": 0}},
                {"name": "rate", "optional": True, "schema": {"type": "number"}},
            ],
        }
    },
}


def capability(raw: dict, **overrides) -> CapabilityDefinition:
    """A capability definition from *raw* with top-level keys replaced."""
    data = copy.deepcopy(raw)
    data.update(overrides)
    return CapabilityDefinition.model_validate(data)


def make_device(
    device_id: str,
    label: str,
    *,
    capabilities=(("switch", 1),),
    location_id: str = "loc-1",
    room_id: str | None = None,
    components: list[dict] | None = None,
) -> Device:
    data = {
        "deviceId": device_id,
        "label": label,
        "locationId": location_id,
        "components": components
        if components is not None
        else [
            {
                "id": "main",
                "capabilities": [{"id": cap_id, "version": v} for cap_id, v in capabilities],
            }
        ],
    }
    if room_id is not None:
        data["roomId"] = room_id
    return Device.model_validate(data)


def make_scene(scene_id: str, name: str, **extra) -> Scene:
    return Scene.model_validate({"sceneId": scene_id, "sceneName": name, "locationId": "loc-1", **extra})


def catalog(*definitions: CapabilityDefinition) -> dict:
    result: dict = {}
    for d in definitions:
        result.setdefault(d.id, {})[d.version] = d
    return result


def home_snapshot() -> CatalogSnapshot:
    """One location, two rooms, three devices (one roomless) and a scene."""
    return CatalogSnapshot(
        devices=[
            make_device("dev-1", "Kitchen Light", room_id="room-1"),
            make_device(
                "dev-2",
                "Floor Lamp",
                room_id="room-2",
                capabilities=(("switchLevel", 1), ("switch", 1)),
            ),
            make_device("dev-3", "Porch Light"),
        ],
        capabilities=catalog(capability(SWITCH), capability(SWITCH_LEVEL)),
        scenes=[
            make_scene(
                "scene-1",
                "Good Night",
                createdDate="2024-01-01T00:00:00Z",
                lastExecutedDate="2024-02-01T00:00:00Z",
            )
        ],
        locations=[Location.model_validate({"locationId": "loc-1", "name": "Home"})],
        rooms=[
            Room.model_validate({"roomId": "room-1", "name": "Kitchen", "locationId": "loc-1"}),
            Room.model_validate({"roomId": "room-2", "name": "Living Room", "locationId": "loc-1"}),
        ],
    )


async def no_sleep(_seconds: float) -> None:
    """Backoff sleep replacement that returns immediately."""


class FakeSource:
    """In-memory ``RemoteSource`` recording every call.

    ``failures[method]`` makes the next N calls of *method* raise
    ``ConnectionError``.
    """

    def __init__(self, snapshot: CatalogSnapshot | None = None, delay: float = 0.0):
        snapshot = snapshot or CatalogSnapshot()
        self.snapshot = snapshot
        self.delay = delay
        self.calls: list[tuple] = []
        self.failures: dict[str, int] = {}

    def count(self, method: str) -> int:
        return sum(1 for call in self.calls if call[0] == method)

    async def _record(self, method: str, *args) -> None:
        self.calls.append((method, *args))
        await asyncio.sleep(self.delay)
        remaining = self.failures.get(method, 0)
        if remaining:
            self.failures[method] = remaining - 1
            raise ConnectionError(f"{method} failed")

    async def list_devices(self) -> list[Device]:
        await self._record("list_devices")
        return list(self.snapshot.devices)

    async def list_scenes(self) -> list[Scene]:
        await self._record("list_scenes")
        return list(self.snapshot.scenes)

    async def list_location_refs(self) -> list[LocationRef]:
        await self._record("list_location_refs")
        return [LocationRef(location_id=loc.location_id) for loc in self.snapshot.locations]

    async def get_location(self, location_id: str) -> Location:
        await self._record("get_location", location_id)
        return next(loc for loc in self.snapshot.locations if loc.location_id == location_id)

    async def list_rooms(self, location_id: str) -> list[Room]:
        await self._record("list_rooms", location_id)
        return [r for r in self.snapshot.rooms if r.location_id == location_id]

    async def get_capability(self, capability_id: str, version: int) -> CapabilityDefinition:
        await self._record("get_capability", capability_id, version)
        return self.snapshot.capabilities[capability_id][version]
