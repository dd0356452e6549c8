"""Pydantic models for the SmartThings catalog and the generated type IR."""

from .capability import (
    Attribute,
    AttributeProperties,
    AttributeSchema,
    CapabilityDefinition,
    CapabilityRef,
    CapabilityStatus,
    Command,
    CommandArgument,
)
from .device import Component, Device
from .location import Location, LocationRef, Room
from .scene import VOLATILE_FIELDS, Scene
from .schema import (
    SUPPORTED_TYPES,
    ArraySchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
    parse_schema,
)
from .snapshot import CapabilityCatalog, CatalogSnapshot
from .types import (
    AnyTypeRef,
    LiteralTypeRef,
    MappingTypeRef,
    NamedTypeRef,
    NumberTypeRef,
    SequenceTypeRef,
    StringTypeRef,
    StructField,
    StructType,
    TypeRef,
)

__all__ = [
    "AnyTypeRef",
    "ArraySchema",
    "Attribute",
    "AttributeProperties",
    "AttributeSchema",
    "CapabilityCatalog",
    "CapabilityDefinition",
    "CapabilityRef",
    "CapabilityStatus",
    "CatalogSnapshot",
    "Command",
    "CommandArgument",
    "Component",
    "Device",
    "LiteralTypeRef",
    "Location",
    "LocationRef",
    "MappingTypeRef",
    "NamedTypeRef",
    "NumberSchema",
    "NumberTypeRef",
    "ObjectSchema",
    "Room",
    "SUPPORTED_TYPES",
    "Scene",
    "SchemaNode",
    "SequenceTypeRef",
    "StringSchema",
    "StringTypeRef",
    "StructField",
    "StructType",
    "TypeRef",
    "VOLATILE_FIELDS",
    "parse_schema",
]
