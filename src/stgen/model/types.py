"""Type IR produced by the schema type mapper.

Two concepts, kept apart the same way the emitter consumes them:

- TypeRef: an inline type expression (a field type, a command argument
  type, a sequence element type).
- StructType: a named structural type (rendered as a ``TypedDict``).  A
  TypeRef never embeds a StructType; it points at one by name through
  NamedTypeRef.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class LiteralTypeRef(BaseModel):
    """Union of literal values, in source order."""

    kind: Literal["literal"] = "literal"
    values: list[Any]


class StringTypeRef(BaseModel):
    kind: Literal["string"] = "string"


class NumberTypeRef(BaseModel):
    kind: Literal["number"] = "number"


class AnyTypeRef(BaseModel):
    kind: Literal["any"] = "any"


class MappingTypeRef(BaseModel):
    """Untyped JSON object."""

    kind: Literal["mapping"] = "mapping"


class SequenceTypeRef(BaseModel):
    kind: Literal["sequence"] = "sequence"
    element_type: TypeRef


class NamedTypeRef(BaseModel):
    """Reference to a StructType (or any other named type) by name."""

    kind: Literal["named"] = "named"
    name: str


TypeRef = Annotated[
    Union[
        LiteralTypeRef,
        StringTypeRef,
        NumberTypeRef,
        AnyTypeRef,
        MappingTypeRef,
        SequenceTypeRef,
        NamedTypeRef,
    ],
    Field(discriminator="kind"),
]


class StructField(BaseModel):
    """Member of a structural type.

    ``key`` is the JSON key exactly as it appears on the wire; it is never
    rewritten into an identifier.
    """

    key: str
    data_type: TypeRef
    required: bool = False
    description: str = ""


class StructType(BaseModel):
    name: str
    fields: list[StructField] = []
    description: str = ""


SequenceTypeRef.model_rebuild()
StructField.model_rebuild()
StructType.model_rebuild()
