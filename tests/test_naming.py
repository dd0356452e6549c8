"""Tests for unique entity naming (stgen.generate._naming)."""

import pytest

from conftest import make_device, make_scene
from stgen.errors import NamingError
from stgen import runtime
from stgen.client import SmartThingsClient
from stgen.generate._naming import (
    MODULE_NAMES,
    NO_ROOM,
    RUNTIME_ATTRIBUTES,
    NameScope,
    NamingContext,
    assign_names,
    natural_key,
    unique_identifiers,
)
from stgen.model import Location, Room


class TestNameScope:
    def test_first_label_keeps_plain_name(self):
        scope = NameScope()
        name = scope.assign("Kitchen Light", "dev-1")
        assert name.type_name == "KitchenLight"
        assert name.method_name == "kitchenLight"

    def test_collision_falls_back_to_label_and_id(self):
        scope = NameScope()
        scope.assign("Light", "a1")
        second = scope.assign("Light", "a2")
        assert second.type_name == "Light_a2"
        assert second.method_name == "light_a2"

    def test_labels_differing_only_in_punctuation_collide(self):
        scope = NameScope()
        scope.assign("Front Door", "x")
        assert scope.assign("front-door", "y").type_name == "FrontDoor_y"

    def test_empty_label_uses_id(self):
        assert NameScope().assign("!!", "abc").type_name == "_abc"

    def test_reserved_names_are_never_assigned(self):
        scope = NameScope(reserved=[NO_ROOM])
        assert scope.assign("No room", "r1").type_name == "NoRoom_r1"

    def test_collision_without_id_is_fatal(self):
        scope = NameScope()
        scope.assign("Light", "a1")
        with pytest.raises(NamingError):
            scope.assign("Light", "")

    def test_exhausted_fallback_is_fatal(self):
        scope = NameScope(reserved=["Light", "Light_a1"])
        with pytest.raises(NamingError, match="already taken"):
            scope.assign("Light", "a1")

    @pytest.mark.parametrize(
        "label, type_name, method_name",
        [
            ("Capabilities", "Capabilities_d1", "capabilities_d1"),
            ("Runtime", "Runtime_d1", "runtime_d1"),
            ("Typed Dict", "TypedDict_d1", "typedDict_d1"),
            ("Super", "Super_d1", "super_d1"),
        ],
    )
    def test_module_names_block_either_variant(self, label, type_name, method_name):
        name = NameScope(MODULE_NAMES).assign(label, "d1")
        assert (name.type_name, name.method_name) == (type_name, method_name)

    def test_contains(self):
        scope = NameScope()
        scope.assign("Den", "r1")
        assert "Den" in scope
        assert "Attic" not in scope


class TestAssignNames:
    def test_order_does_not_depend_on_input_order(self):
        devices = [make_device("a2", "Light"), make_device("a1", "Light")]
        named = assign_names(devices, lambda d: d.display_label, lambda d: d.device_id)
        assert [(d.device_id, n.type_name) for d, n in named] == [
            ("a1", "Light"),
            ("a2", "Light_a2"),
        ]
        reversed_named = assign_names(
            list(reversed(devices)), lambda d: d.display_label, lambda d: d.device_id
        )
        assert [n for _, n in reversed_named] == [n for _, n in named]

    def test_natural_key_ignores_case_first(self):
        labels = ["b", "B", "a", "C"]
        assert sorted(labels, key=natural_key) == ["a", "B", "b", "C"]

    def test_names_unique_for_many_duplicates(self):
        devices = [make_device(f"id{i}", "Sensor") for i in range(10)]
        named = assign_names(devices, lambda d: d.display_label, lambda d: d.device_id)
        names = [n.type_name for _, n in named]
        assert len(set(names)) == len(names)
        assert "Sensor" in names
        assert all(name == "Sensor" or name.startswith("Sensor_id") for name in names)


class TestNamingContext:
    def test_devices_are_recorded_by_id(self):
        naming = NamingContext()
        naming.name_devices([make_device("a1", "Light"), make_device("a2", "Light")])
        assert naming.device_name("a1").method_name == "light"
        assert naming.device_name("a2").method_name == "light_a2"

    def test_unknown_device_is_an_error(self):
        with pytest.raises(NamingError):
            NamingContext().device_name("missing")

    def test_room_scopes_are_per_location(self):
        naming = NamingContext()
        first = naming.name_rooms([Room(room_id="r1", name="Kitchen", location_id="l1")])
        second = naming.name_rooms([Room(room_id="r2", name="Kitchen", location_id="l2")])
        assert first[0][1].type_name == second[0][1].type_name == "Kitchen"

    def test_rooms_cannot_take_bucket_names(self):
        naming = NamingContext()
        named = naming.name_rooms([Room(room_id="r1", name="NoRoom", location_id="l1")])
        assert named[0][1].type_name == "Noroom"
        named = naming.name_rooms([Room(room_id="r2", name="no room", location_id="l1")])
        assert named[0][1].type_name == "NoRoom_r2"

    def test_devices_avoid_runtime_attributes(self):
        naming = NamingContext()
        naming.name_devices([make_device("d1", "device_id"), make_device("d2", "Devices")])
        assert naming.device_name("d1").method_name == "device_id_d1"
        assert naming.device_name("d2").method_name == "devices_d2"

    def test_rooms_avoid_runtime_attributes(self):
        naming = NamingContext()
        named = naming.name_rooms([Room(room_id="room-1", name="api_client", location_id="l1")])
        assert named[0][1].method_name == "api_client_room1"

    def test_scenes_and_locations_are_separate_scopes(self):
        naming = NamingContext()
        naming.name_scenes([make_scene("s1", "Home")])
        naming.name_locations([Location(location_id="l1", name="Home")])
        assert naming.scenes["s1"].type_name == "Home"
        assert naming.locations["l1"].type_name == "Home"


class TestUniqueIdentifiers:
    def test_maps_ids(self):
        assert unique_identifiers(["switch", "switchLevel"], "Capability") == {
            "switch": "Switch",
            "switchLevel": "Switchlevel",
        }

    def test_clash_is_an_error(self):
        with pytest.raises(NamingError, match="both resolve"):
            unique_identifiers(["switch", "Switch"], "Capability")

    def test_duplicate_is_an_error(self):
        with pytest.raises(NamingError, match="more than once"):
            unique_identifiers(["main", "main"], "Component")

    def test_unusable_id_is_an_error(self):
        with pytest.raises(NamingError):
            unique_identifiers(["???"], "Component")

    def test_reserved_name_is_an_error(self):
        with pytest.raises(NamingError, match="reserved name 'execute_command'"):
            unique_identifiers(
                ["on", "execute_command"], "switch command", reserved=RUNTIME_ATTRIBUTES, lower=True
            )

    def test_lower_variant(self):
        assert unique_identifiers(["setLevel", "Main"], "Command", lower=True) == {
            "setLevel": "setlevel",
            "Main": "main",
        }


class TestRuntimeAttributes:
    def test_covers_attributes_of_runtime_bases(self):
        client = SmartThingsClient("token")

        class KitchenLight(runtime.Device):
            RAW = {"deviceId": "d1"}

        class Main(runtime.Component):
            RAW = {"id": "main"}

        class Switch(runtime.Capability):
            RAW = {"id": "switch"}

        class Home(runtime.Location):
            RAW = {"locationId": "l1"}

        class Kitchen(runtime.Room):
            RAW = {"roomId": "r1"}

        device = KitchenLight(client)
        component = Main(device)
        location = Home(client)
        for instance in (device, component, Switch(component), location, Kitchen(location)):
            public = {name for name in dir(instance) if not name.startswith("_")}
            assert public <= RUNTIME_ATTRIBUTES, type(instance).__name__
