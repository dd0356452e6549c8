"""Locations and rooms."""

from __future__ import annotations

from ._wire import WireModel


class LocationRef(WireModel):
    """Entry of the location listing; only the id is relied upon."""

    location_id: str
    name: str | None = None


class Location(WireModel):
    location_id: str
    name: str = ""


class Room(WireModel):
    """A room.  Belongs to exactly one location."""

    room_id: str
    name: str = ""
    location_id: str
