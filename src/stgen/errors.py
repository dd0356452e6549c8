"""Exception hierarchy for stgen."""

from __future__ import annotations


class StgenError(Exception):
    """Base class for errors raised by stgen itself."""


class UnsupportedSchemaError(StgenError):
    """A capability schema node uses a type outside the supported vocabulary."""

    def __init__(self, schema_type: object, path: str = "") -> None:
        self.schema_type = schema_type
        self.path = path
        where = f" at {path}" if path else ""
        super().__init__(f"Unsupported schema type {schema_type!r}{where}")


class NamingError(StgenError):
    """No unique, legal name could be assigned to an entity."""


class GenerationError(StgenError):
    """The catalog snapshot cannot be turned into consistent source modules."""
