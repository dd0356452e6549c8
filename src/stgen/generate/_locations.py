"""Emitter for ``locations.py``: locations with their rooms inline.

Rooms refer to devices through the accessor names assigned while
``devices.py`` was emitted, so this module must be written last.
"""

from __future__ import annotations

from typing import Any

from stgen.model import CatalogSnapshot, Device, Location

from ._naming import NO_ROOM, NO_ROOM_ATTRIBUTE, AssignedName, NamingContext, natural_key
from ._writer import SourceWriter, doc_text


NO_ROOM_NAME = "No room assigned"


def _by_label(devices: list[Device]) -> list[Device]:
    return sorted(devices, key=lambda d: natural_key(d.display_label, d.device_id))


class LocationsWriter(SourceWriter):

    def write_module(self, snapshot: CatalogSnapshot, naming: NamingContext) -> None:
        self.write_header(
            "SmartThings location clients.",
            [
                "from stgen import runtime",
                "from stgen.client import SmartThingsClient",
                "",
                "from . import devices",
            ],
        )
        for location, name in naming.name_locations(snapshot.locations):
            self._line()
            self._line()
            self.write_location(location, name, snapshot, naming)

    def write_location(
        self,
        location: Location,
        name: AssignedName,
        snapshot: CatalogSnapshot,
        naming: NamingContext,
    ) -> None:
        label = doc_text(location.name)
        rooms = [r for r in snapshot.rooms if r.location_id == location.location_id]
        room_ids = {r.room_id for r in rooms}
        # a device whose room is unknown is treated as roomless
        roomless = _by_label(
            [
                d for d in snapshot.devices
                if d.location_id == location.location_id and d.room_id not in room_ids
            ]
        )
        named_rooms = naming.name_rooms(rooms)

        self._line(f"def {name.method_name}(client: SmartThingsClient) -> {name.type_name}.Location:")
        self._indent_inc()
        self.write_docstring(f'Gets a location client for "{label}".')
        self._line(f"return {name.type_name}.Location(client)")
        self._indent_dec()
        self._line()
        self._line()
        self._line(f"class {name.type_name}:")
        self._indent_inc()
        self.write_docstring(f'Namespace for location "{label}".')
        self._line()
        self._line("class Rooms:")
        self._indent_inc()
        for room, room_name in named_rooms:
            members = _by_label([d for d in snapshot.devices if d.room_id == room.room_id])
            self._line()
            self.write_room(
                room_name.type_name, f'Room "{doc_text(room.name)}".', room.raw(), members, naming
            )
        self._line()
        self.write_room(
            NO_ROOM,
            f'Devices in "{label}" that are not assigned to a room.',
            {"locationId": location.location_id, "name": NO_ROOM_NAME},
            roomless,
            naming,
        )
        self._indent_dec()

        self._line()
        self._line("class Location(runtime.Location):")
        self._indent_inc()
        self.write_docstring(f'Location client for "{label}".')
        self._line()
        self.write_raw("RAW", location.raw())
        self._line()
        self._line("def __init__(self, client: SmartThingsClient) -> None:")
        self._indent_inc()
        self._line("super().__init__(client)")
        for _room, room_name in named_rooms:
            self._line(
                f"self.{room_name.method_name} = {name.type_name}.Rooms.{room_name.type_name}(self)"
            )
        self._line(f"self.{NO_ROOM_ATTRIBUTE} = {name.type_name}.Rooms.{NO_ROOM}(self)")
        self._indent_dec()
        self._indent_dec()
        self._indent_dec()

    def write_room(
        self,
        class_name: str,
        doc: str,
        raw: dict[str, Any],
        members: list[Device],
        naming: NamingContext,
    ) -> None:
        self._line(f"class {class_name}(runtime.Room):")
        self._indent_inc()
        self.write_docstring(doc)
        self._line()
        self.write_raw("RAW", raw)
        self._line()
        self._line("def __init__(self, location: runtime.Location) -> None:")
        self._indent_inc()
        self._line("super().__init__(location)")
        for device in members:
            method = naming.device_name(device.device_id).method_name
            self._line(f"self.{method} = devices.{method}(self.api_client)")
        self._indent_dec()
        self._indent_dec()
