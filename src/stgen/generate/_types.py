"""Schema type mapper: capability schema nodes -> type IR.

``SchemaTypeMapper.map`` walks one ``SchemaNode`` and returns the TypeRef
describing it.  Object nodes with ``properties`` cannot be written inline in
Python, so each becomes a named ``StructType`` collected in
``definitions`` (nested shapes before the shapes that use them) and the
node is referenced by name.  Struct names come from the identifier resolver
applied to the path of labels leading to the node, which keeps them stable
between runs.

Optionality follows the capability schema rules:

- a property of an object is required only when the caller asked for
  required-sensitive mapping *and* the object lists it in ``required``;
- nested objects, array items and command arguments are always mapped
  relaxed (every property optional);
- an attribute's ``data`` payload is mapped required-sensitive.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from stgen.errors import UnsupportedSchemaError
from stgen.model import (
    AnyTypeRef,
    ArraySchema,
    AttributeSchema,
    LiteralTypeRef,
    MappingTypeRef,
    NamedTypeRef,
    NumberSchema,
    NumberTypeRef,
    ObjectSchema,
    SchemaNode,
    SequenceTypeRef,
    StringSchema,
    StringTypeRef,
    StructField,
    StructType,
    TypeRef,
    parse_schema,
)

from ._identifiers import identifier


def canonical_json(value: Any) -> str:
    """Key-order-stable compact JSON."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


class SchemaTypeMapper:
    """Maps the schema nodes of one capability version.

    One mapper per namespace: struct names are unique within it and
    ``reserved`` names (``Status``, ``Capability``, ...) are never handed out.
    """

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self.definitions: list[StructType] = []
        self._names: set[str] = set(reserved)

    def map(self, node: SchemaNode | dict[str, Any], name: str, *, required: bool = False) -> TypeRef:
        """Map *node*; *name* is the label path used to name hoisted structs."""
        node = parse_schema(node)
        if isinstance(node, StringSchema):
            if node.enum:
                return LiteralTypeRef(values=list(node.enum))
            return StringTypeRef()
        if isinstance(node, NumberSchema):
            return NumberTypeRef()
        if isinstance(node, ArraySchema):
            if node.items is None:
                return SequenceTypeRef(element_type=AnyTypeRef())
            return SequenceTypeRef(element_type=self.map(node.items, f"{name} item"))
        if isinstance(node, ObjectSchema):
            if node.properties is None:
                return MappingTypeRef()
            return self._map_object(node, name, required)
        raise UnsupportedSchemaError(getattr(node, "type", None), name)

    def _map_object(self, node: ObjectSchema, name: str, required: bool) -> NamedTypeRef:
        assert node.properties is not None
        fields: list[StructField] = []
        for key in sorted(node.properties):
            prop = node.properties[key]
            doc = prop.documentation()
            fields.append(
                StructField(
                    key=key,
                    data_type=self.map(prop, f"{name} {key}"),
                    required=required and key in node.required,
                    description=canonical_json(doc) if doc else "",
                )
            )
        struct = StructType(name=self._struct_name(name), fields=fields)
        self.definitions.append(struct)
        return NamedTypeRef(name=struct.name)

    def map_attribute(self, attribute_name: str, schema: AttributeSchema) -> StructType:
        """Build the status shape ``{value, unit?, data?}`` of one attribute."""
        props = schema.properties
        fields = [
            StructField(
                key="value",
                data_type=self.map(props.value, f"{attribute_name} value"),
                required="value" in schema.required,
            )
        ]
        if props.unit is not None:
            fields.append(
                StructField(
                    key="unit",
                    data_type=self.map(props.unit, f"{attribute_name} unit"),
                    required="unit" in schema.required,
                )
            )
        if props.data is not None:
            fields.append(
                StructField(
                    key="data",
                    data_type=self.map(props.data, f"{attribute_name} data", required=True),
                    required="data" in schema.required,
                )
            )
        struct = StructType(
            name=self._struct_name(f"{attribute_name} attribute"),
            fields=fields,
            description=f'Status of the "{attribute_name}" attribute.',
        )
        self.definitions.append(struct)
        return struct

    def _struct_name(self, label: str) -> str:
        base = identifier(label) or "Struct"
        name = base
        n = 2
        while name in self._names:
            name = f"{base}{n}"
            n += 1
        self._names.add(name)
        return name
