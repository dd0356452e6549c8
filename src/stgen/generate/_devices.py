"""Emitter for ``devices.py``: one accessor and namespace per device."""

from __future__ import annotations

from stgen.model import Component, Device, NamedTypeRef, StructField, StructType

from ._capabilities import capability_namespace
from ._identifiers import identifier_sort_key
from ._naming import RUNTIME_ATTRIBUTES, AssignedName, NamingContext, unique_identifiers
from ._writer import SourceWriter, doc_text


def sorted_components(device: Device) -> Device:
    """Copy of *device* with components and capability refs in emission order."""
    components = [
        component.model_copy(
            update={
                "capabilities": sorted(
                    component.capabilities,
                    key=lambda ref: (*identifier_sort_key(ref.id), ref.version),
                )
            }
        )
        for component in device.components
    ]
    components.sort(key=lambda c: identifier_sort_key(c.id))
    return device.model_copy(update={"components": components})


class DevicesWriter(SourceWriter):

    def write_module(self, devices: list[Device], naming: NamingContext) -> None:
        self.write_header(
            "SmartThings device clients.",
            [
                "from typing import Any, TypedDict",
                "",
                "from stgen import runtime",
                "from stgen.client import SmartThingsClient",
                "",
                "from . import capabilities",
            ],
        )
        for device, name in naming.name_devices(devices):
            self._line()
            self._line()
            self.write_device(sorted_components(device), name)

    def write_device(self, device: Device, name: AssignedName) -> None:
        label = doc_text(device.display_label)
        self._line(f"def {name.method_name}(client: SmartThingsClient) -> {name.type_name}.Device:")
        self._indent_inc()
        self.write_docstring(f'Gets a device client for "{label}".')
        self._line(f"return {name.type_name}.Device(client)")
        self._indent_dec()
        self._line()
        self._line()
        self._line(f"class {name.type_name}:")
        self._indent_inc()
        self.write_docstring(f'Namespace for device "{label}".')

        component_names = unique_identifiers([c.id for c in device.components], f"{label} component")
        component_attributes = unique_identifiers(
            [c.id for c in device.components],
            f"{label} component",
            reserved=RUNTIME_ATTRIBUTES,
            lower=True,
        )
        self._line()
        self._line("class Components:")
        self._indent_inc()
        if not device.components:
            self._line("pass")
        for component in device.components:
            self._line()
            self.write_component(component, component_names[component.id])
        self._indent_dec()

        self._line()
        self.write_struct(
            StructType(
                name="ComponentStatuses",
                fields=[
                    StructField(
                        key=c.id,
                        data_type=NamedTypeRef(name=f"Components.{component_names[c.id]}.Status"),
                        required=True,
                    )
                    for c in device.components
                ],
            )
        )
        self._line()
        self.write_struct(
            StructType(
                name="Status",
                fields=[
                    StructField(
                        key="components",
                        data_type=NamedTypeRef(name="ComponentStatuses"),
                        required=True,
                    )
                ],
                description=f'Status type for "{label}".',
            )
        )

        self._line()
        self._line("class Device(runtime.Device[Status]):")
        self._indent_inc()
        self.write_docstring(f'Device client for "{label}".')
        self._line()
        self.write_raw("RAW", device.raw())
        self._line()
        self._line("def __init__(self, client: SmartThingsClient) -> None:")
        self._indent_inc()
        self._line("super().__init__(client)")
        for component in device.components:
            self._line(
                f"self.{component_attributes[component.id]} = "
                f"{name.type_name}.Components.{component_names[component.id]}.Component(self)"
            )
        self._indent_dec()
        self._indent_dec()
        self._indent_dec()

    def write_component(self, component: Component, class_name: str) -> None:
        description = " - ".join(s for s in (component.label, component.id) if s)
        self._line(f"class {class_name}:")
        self._indent_inc()
        self.write_docstring(f'Component "{doc_text(description)}".')
        self._line()
        attributes = unique_identifiers(
            [ref.id for ref in component.capabilities],
            f"{component.id} capability",
            reserved=RUNTIME_ATTRIBUTES,
            lower=True,
        )
        self.write_struct(
            StructType(
                name="Status",
                fields=[
                    StructField(
                        key=ref.id,
                        data_type=NamedTypeRef(
                            name=f"capabilities.{capability_namespace(ref.id, ref.version)}.Status"
                        ),
                        required=True,
                    )
                    for ref in component.capabilities
                ],
            )
        )
        self._line()
        self._line("class Component(runtime.Component[Status]):")
        self._indent_inc()
        self.write_docstring(f'Component client for "{doc_text(description)}".')
        self._line()
        self.write_raw("RAW", component.raw())
        self._line()
        self._line("def __init__(self, device: runtime.Device[Any]) -> None:")
        self._indent_inc()
        self._line("super().__init__(device)")
        for ref in component.capabilities:
            self._line(
                f"self.{attributes[ref.id]} = "
                f"capabilities.{capability_namespace(ref.id, ref.version)}.Capability(self)"
            )
        self._indent_dec()
        self._indent_dec()
        self._indent_dec()
