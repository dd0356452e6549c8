"""Capability schema nodes.

The vocabulary is closed: ``string`` (optionally with ``enum``),
``integer``/``number``, ``array`` and ``object``.  Every node is a member of
the ``SchemaNode`` discriminated union.  A node with any other ``type`` (or
none at all) is rejected with ``UnsupportedSchemaError`` before pydantic tries
to match it, so an unknown tag never degrades into a generic validation
failure or a guessed type.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, field_validator

from stgen.errors import UnsupportedSchemaError


SUPPORTED_TYPES = frozenset({"string", "integer", "number", "array", "object"})

# Keys that decide the shape of a node.  Whatever else a node carries
# (title, minimum, maximum, pattern, ...) is documentation only.
SHAPE_KEYS = frozenset({"type", "enum", "items", "properties", "required"})


def _check_vocabulary(value: Any) -> Any:
    if isinstance(value, dict):
        schema_type = value.get("type")
        # a list of types ("type": ["string", "null"]) is not part of the vocabulary
        if not isinstance(schema_type, str) or schema_type not in SUPPORTED_TYPES:
            raise UnsupportedSchemaError(schema_type)
    return value


class _SchemaBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    def documentation(self) -> dict[str, Any]:
        """The node as received, minus the shape keys."""
        data = self.model_dump(mode="json", exclude_unset=True, by_alias=True)
        return {k: v for k, v in data.items() if k not in SHAPE_KEYS}


class StringSchema(_SchemaBase):
    """``{"type": "string"}``, optionally restricted to ``enum`` literals."""

    type: Literal["string"] = "string"
    enum: list[Any] | None = None


class NumberSchema(_SchemaBase):
    """``integer`` and ``number`` are not distinguished in generated code."""

    type: Literal["integer", "number"] = "number"


class ArraySchema(_SchemaBase):
    type: Literal["array"] = "array"
    items: SchemaNode | None = None

    @field_validator("items", mode="before")
    @classmethod
    def _unwrap_tuple_items(cls, value: Any) -> Any:
        # ``items: [schema]`` is accepted as a synonym for ``items: schema``
        if isinstance(value, list):
            return value[0] if value else None
        return value


class ObjectSchema(_SchemaBase):
    type: Literal["object"] = "object"
    properties: dict[str, SchemaNode] | None = None
    required: list[str] = []


SchemaNode = Annotated[
    Union[StringSchema, NumberSchema, ArraySchema, ObjectSchema],
    Field(discriminator="type"),
    BeforeValidator(_check_vocabulary),
]


ArraySchema.model_rebuild()
ObjectSchema.model_rebuild()

_SCHEMA_NODE: TypeAdapter[Any] = TypeAdapter(SchemaNode)


def parse_schema(raw: Any) -> SchemaNode:
    """Validate a raw JSON schema dict into a ``SchemaNode``.

    Raises ``UnsupportedSchemaError`` for a type outside the vocabulary,
    anywhere in the tree.
    """
    if isinstance(raw, _SchemaBase):
        return raw
    return _SCHEMA_NODE.validate_python(raw)
