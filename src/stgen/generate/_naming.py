"""Unique, deterministic naming of catalog entities.

Labels are free text chosen by users, so two devices (or rooms, locations,
scenes) can resolve to the same identifier.  Within one scope the first
entity in label order keeps the plain name; any later one is renamed from
``label + "_" + id``.  There is no counter: the id makes the fallback unique
and keeps it stable when unrelated entities are added or removed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from stgen.errors import NamingError
from stgen.model import Device, Location, Room, Scene

from ._identifiers import identifier


T = TypeVar("T")

NO_ROOM = "NoRoom"
"""Class name reserved in every location for devices without a room."""

NO_ROOM_ATTRIBUTE = "noRoomAssigned"
"""Location attribute holding the NO_ROOM bucket."""

MODULE_NAMES = frozenset(
    {
        "Any",
        "Literal",
        "NotRequired",
        "SmartThingsClient",
        "TypedDict",
        "annotations",
        "capabilities",
        "devices",
        "runtime",
        "super",
    }
)
"""Module-level names the generated modules import or call."""

RUNTIME_ATTRIBUTES = frozenset(
    {
        "RAW",
        "api_client",
        "capability_id",
        "component_id",
        "device_id",
        "execute_command",
        "get_status",
        "location_id",
        "parent_component",
        "parent_device",
        "parent_location",
        "raw_record",
        "room_id",
        "send_events",
    }
)
"""Instance attributes of the ``stgen.runtime`` bases that generated subclasses extend."""


def natural_key(label: str, entity_id: str = "") -> tuple[str, str, str]:
    """Human label order that does not depend on the process locale."""
    return (label.casefold(), label, entity_id)


@dataclass(frozen=True)
class AssignedName:
    type_name: str
    """PascalCase name for the namespace / class."""

    method_name: str
    """camelCase name for accessors and attributes."""


class NameScope:
    """One naming scope: all devices, all locations, the rooms of a location.

    A name is taken when either its type variant or its method variant is
    already used or reserved.
    """

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._used: set[str] = set(reserved)

    def __contains__(self, name: str) -> bool:
        return name in self._used

    def _free(self, label: str) -> AssignedName | None:
        type_name = identifier(label)
        if not type_name:
            return None
        method_name = identifier(label, lower=True)
        if type_name in self._used or method_name in self._used:
            return None
        return AssignedName(type_name=type_name, method_name=method_name)

    def assign(self, label: str, entity_id: str) -> AssignedName:
        name = self._free(label)
        if name is None:
            if not entity_id:
                raise NamingError(f"Cannot disambiguate {label!r}: entity has no id")
            name = self._free(f"{label}_{entity_id}")
            if name is None:
                raise NamingError(
                    f"Name for {label!r} (id {entity_id!r}) is already taken"
                )
        self._used.update((name.type_name, name.method_name))
        return name


def assign_names(
    entities: Iterable[T],
    label: Callable[[T], str],
    entity_id: Callable[[T], str],
    scope: NameScope | None = None,
) -> list[tuple[T, AssignedName]]:
    """Sort *entities* into label order and name each one within *scope*."""
    scope = scope if scope is not None else NameScope()
    ordered = sorted(entities, key=lambda e: natural_key(label(e), entity_id(e)))
    return [(e, scope.assign(label(e), entity_id(e))) for e in ordered]


@dataclass
class NamingContext:
    """Names assigned during one generation run, keyed by entity id.

    Modules emitted later (locations) look up names assigned while emitting
    earlier ones (devices), so the two always agree.
    """

    devices: dict[str, AssignedName] = field(default_factory=dict)
    scenes: dict[str, AssignedName] = field(default_factory=dict)
    locations: dict[str, AssignedName] = field(default_factory=dict)
    rooms: dict[str, AssignedName] = field(default_factory=dict)

    def name_devices(self, devices: Iterable[Device]) -> list[tuple[Device, AssignedName]]:
        scope = NameScope(reserved=MODULE_NAMES | RUNTIME_ATTRIBUTES)
        named = assign_names(devices, lambda d: d.display_label, lambda d: d.device_id, scope)
        for device, name in named:
            self.devices[device.device_id] = name
        return named

    def name_scenes(self, scenes: Iterable[Scene]) -> list[tuple[Scene, AssignedName]]:
        named = assign_names(
            scenes, lambda s: s.display_name, lambda s: s.scene_id, NameScope(MODULE_NAMES)
        )
        for scene, name in named:
            self.scenes[scene.scene_id] = name
        return named

    def name_locations(
        self, locations: Iterable[Location]
    ) -> list[tuple[Location, AssignedName]]:
        named = assign_names(
            locations, lambda loc: loc.name, lambda loc: loc.location_id, NameScope(MODULE_NAMES)
        )
        for location, name in named:
            self.locations[location.location_id] = name
        return named

    def name_rooms(self, rooms: Iterable[Room]) -> list[tuple[Room, AssignedName]]:
        """Name the rooms of one location.  Each call is a fresh scope."""
        scope = NameScope(
            reserved={NO_ROOM, "NoRoomAssigned", NO_ROOM_ATTRIBUTE} | RUNTIME_ATTRIBUTES
        )
        named = assign_names(rooms, lambda r: r.name, lambda r: r.room_id, scope)
        for room, name in named:
            self.rooms[room.room_id] = name
        return named

    def device_name(self, device_id: str) -> AssignedName:
        try:
            return self.devices[device_id]
        except KeyError:
            raise NamingError(f"Device {device_id!r} was referenced before it was named") from None


def unique_identifiers(
    ids: Iterable[str],
    what: str,
    *,
    reserved: Iterable[str] = (),
    lower: bool = False,
) -> dict[str, str]:
    """Map raw ids (capability ids, component ids, commands) to identifiers.

    These ids are assigned by the platform rather than typed by users, so a
    clash, with each other or with a *reserved* name, is a data error rather
    than something to paper over.  *lower* selects the attribute variant.
    """
    reserved = frozenset(reserved)
    names: dict[str, str] = {}
    owners: dict[str, str] = {}
    for raw_id in ids:
        if raw_id in names:
            raise NamingError(f"{what} id {raw_id!r} appears more than once")
        name = identifier(raw_id, lower=lower)
        if not name:
            raise NamingError(f"{what} id {raw_id!r} has no usable characters")
        if name in reserved:
            raise NamingError(f"{what} id {raw_id!r} resolves to the reserved name {name!r}")
        other = owners.setdefault(name, raw_id)
        if other != raw_id:
            raise NamingError(f"{what} ids {other!r} and {raw_id!r} both resolve to {name!r}")
        names[raw_id] = name
    return names
