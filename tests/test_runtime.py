"""Tests for the runtime base classes (stgen.runtime)."""

import pytest

from stgen import runtime


pytestmark = pytest.mark.asyncio


class FakeClient:
    def __init__(self):
        self.calls: list[tuple] = []

    async def execute_commands(self, device_id, commands):
        self.calls.append(("commands", device_id, commands))
        return {"results": []}

    async def create_events(self, device_id, events):
        self.calls.append(("events", device_id, events))
        return {}

    async def get_capability_status(self, device_id, component_id, capability_id):
        self.calls.append(("status", device_id, component_id, capability_id))
        return {"level": {"value": 10}}

    async def execute_scene(self, scene_id):
        self.calls.append(("scene", scene_id))
        return {"status": "success"}


class Lamp(runtime.Device):
    RAW = {"deviceId": "lamp-1"}


class Main(runtime.Component):
    RAW = {"id": "main"}


class Level(runtime.Capability):
    RAW = {"id": "switchLevel", "version": 1}


class Bedtime(runtime.Scene):
    RAW = {"sceneId": "scene-9"}


def level_capability(client):
    return Level(Main(Lamp(client)))


class TestCapability:
    async def test_trailing_none_arguments_are_dropped(self):
        client = FakeClient()
        await level_capability(client).execute_command("setLevel", [40, None])
        assert client.calls == [
            (
                "commands",
                "lamp-1",
                [
                    {
                        "component": "main",
                        "capability": "switchLevel",
                        "command": "setLevel",
                        "arguments": [40],
                    }
                ],
            )
        ]

    async def test_inner_none_is_kept(self):
        client = FakeClient()
        await level_capability(client).execute_command("setLevel", [None, 5])
        assert client.calls[0][2][0]["arguments"] == [None, 5]

    async def test_no_arguments_key_when_empty(self):
        client = FakeClient()
        await level_capability(client).execute_command("on", [None])
        assert "arguments" not in client.calls[0][2][0]

    async def test_send_events_are_decorated(self):
        client = FakeClient()
        await level_capability(client).send_events(
            {"attribute": "level", "value": 30, "unit": "%"}
        )
        assert client.calls == [
            (
                "events",
                "lamp-1",
                [
                    {
                        "component": "main",
                        "capability": "switchLevel",
                        "attribute": "level",
                        "value": 30,
                        "unit": "%",
                    }
                ],
            )
        ]

    async def test_status(self):
        client = FakeClient()
        assert await level_capability(client).get_status() == {"level": {"value": 10}}
        assert client.calls == [("status", "lamp-1", "main", "switchLevel")]


class TestScene:
    async def test_execute(self):
        client = FakeClient()
        assert await Bedtime(client).execute() == {"status": "success"}
        assert client.calls == [("scene", "scene-9")]


class TestRoom:
    def test_bucket_room_has_no_id(self):
        class Home(runtime.Location):
            RAW = {"locationId": "loc-1", "name": "Home"}

        class NoRoom(runtime.Room):
            RAW = {"locationId": "loc-1", "name": "No room assigned"}

        room = NoRoom(Home(FakeClient()))
        assert room.room_id is None
        assert room.parent_location.location_id == "loc-1"
