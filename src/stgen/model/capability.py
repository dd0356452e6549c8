"""Capability references and capability definitions."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import Field, field_validator

from ._wire import WireModel
from .schema import SchemaNode


class CapabilityStatus(str, Enum):
    LIVE = "live"
    PROPOSED = "proposed"
    DEPRECATED = "deprecated"
    DEAD = "dead"


class CapabilityRef(WireModel):
    """A capability attached to a component.  Shared by many components."""

    id: str
    version: int = 1

    @property
    def key(self) -> tuple[str, int]:
        return (self.id, self.version)


class AttributeProperties(WireModel):
    value: SchemaNode
    unit: SchemaNode | None = None
    data: SchemaNode | None = None


class AttributeSchema(WireModel):
    """Schema of one attribute's status payload: ``{value, unit?, data?}``."""

    type: Literal["object"] = "object"
    properties: AttributeProperties
    required: list[str] = []


class Attribute(WireModel):
    schema_: AttributeSchema = Field(alias="schema")
    enum_commands: list[dict[str, Any]] = []


class CommandArgument(WireModel):
    name: str
    optional: bool = False
    schema_: SchemaNode = Field(alias="schema")


class Command(WireModel):
    name: str | None = None
    arguments: list[CommandArgument] = []


class CapabilityDefinition(WireModel):
    """A capability at one version.  Uniquely identified by ``(id, version)``."""

    id: str
    version: int = 1
    name: str | None = None
    status: str | None = None
    attributes: dict[str, Attribute] = {}
    commands: dict[str, Command] = {}

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @property
    def key(self) -> tuple[str, int]:
        return (self.id, self.version)

    @property
    def display_name(self) -> str:
        return self.name or self.id
