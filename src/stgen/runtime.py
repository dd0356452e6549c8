"""Base classes extended by generated client modules.

Generated classes carry their catalog record in a ``RAW`` class attribute;
the bases here read ids from it and forward requests to a
``SmartThingsClient`` handed in explicitly.  The instance attributes set
here are listed in ``stgen.generate._naming.RUNTIME_ATTRIBUTES``; the
generator never assigns those names to component, capability, room or
device attributes.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypedDict, TypeVar

from stgen.client import SmartThingsClient


StatusT = TypeVar("StatusT")


class EventDescription(TypedDict, total=False):
    """One attribute event sent through ``Capability.send_events``."""

    attribute: str
    value: Any
    unit: str
    data: dict[str, Any]


class Device(Generic[StatusT]):
    RAW: ClassVar[dict[str, Any]] = {}

    def __init__(self, client: SmartThingsClient) -> None:
        self.api_client = client
        self.raw_record = self.RAW
        self.device_id: str = self.RAW["deviceId"]

    async def get_status(self) -> StatusT:
        return await self.api_client.get_device_status(self.device_id)


class Component(Generic[StatusT]):
    RAW: ClassVar[dict[str, Any]] = {}

    def __init__(self, device: Device[Any]) -> None:
        self.parent_device = device
        self.api_client = device.api_client
        self.raw_record = self.RAW
        self.component_id: str = self.RAW["id"]

    async def get_status(self) -> StatusT:
        return await self.api_client.get_component_status(
            self.parent_device.device_id, self.component_id
        )


class Capability(Generic[StatusT]):
    RAW: ClassVar[dict[str, Any]] = {}

    def __init__(self, component: Component[Any]) -> None:
        self.parent_component = component
        self.parent_device = component.parent_device
        self.api_client = component.api_client
        self.raw_record = self.RAW
        self.capability_id: str = self.RAW["id"]

    async def get_status(self) -> StatusT:
        return await self.api_client.get_capability_status(
            self.parent_device.device_id,
            self.parent_component.component_id,
            self.capability_id,
        )

    async def execute_command(self, command: str, arguments: list[Any]) -> dict[str, Any]:
        """Send one command to this capability of the parent component.

        Trailing ``None`` arguments are dropped: omitted optional arguments
        are not sent at all.
        """
        arguments = list(arguments)
        while arguments and arguments[-1] is None:
            arguments.pop()
        payload: dict[str, Any] = {
            "component": self.parent_component.component_id,
            "capability": self.capability_id,
            "command": command,
        }
        if arguments:
            payload["arguments"] = arguments
        return await self.api_client.execute_commands(self.parent_device.device_id, [payload])

    async def send_events(self, *events: EventDescription) -> dict[str, Any]:
        """Create attribute events on this capability, e.g. for virtual devices."""
        decorated = [
            {
                "component": self.parent_component.component_id,
                "capability": self.capability_id,
                **event,
            }
            for event in events
        ]
        return await self.api_client.create_events(self.parent_device.device_id, decorated)


class Location:
    RAW: ClassVar[dict[str, Any]] = {}

    def __init__(self, client: SmartThingsClient) -> None:
        self.api_client = client
        self.raw_record = self.RAW
        self.location_id: str = self.RAW["locationId"]


class Room:
    RAW: ClassVar[dict[str, Any]] = {}

    def __init__(self, location: Location) -> None:
        self.parent_location = location
        self.api_client = location.api_client
        self.raw_record = self.RAW
        # the NoRoom bucket has no id
        self.room_id: str | None = self.RAW.get("roomId")


class Scene:
    RAW: ClassVar[dict[str, Any]] = {}

    def __init__(self, client: SmartThingsClient) -> None:
        self.api_client = client
        self.raw_record = self.RAW
        self.scene_id: str = self.RAW["sceneId"]

    async def execute(self) -> dict[str, Any]:
        return await self.api_client.execute_scene(self.scene_id)
