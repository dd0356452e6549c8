"""Shared pydantic configuration for records that mirror the REST API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """A record as sent by the API.

    Fields are snake_case in Python and camelCase on the wire.  Unknown wire
    fields are kept so that ``raw()`` reproduces the record in full.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def raw(self) -> dict[str, Any]:
        """The record in wire form, containing only the keys that were set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
