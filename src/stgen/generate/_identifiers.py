"""Label -> identifier resolution.

Turns arbitrary user-facing text (device labels, room names, capability
ids, attribute names, ...) into legal Python identifiers.  The mapping is a
pure function of its input: the emitter calls it independently while
writing different modules and relies on getting the same answer each time.
Uniqueness is not handled here; see ``_naming``.
"""

from __future__ import annotations

import keyword
import re
import unicodedata


_APOSTROPHES = re.compile("['’]")
_SEPARATOR_RUN = re.compile(r"[^a-zA-Z0-9_]+")

DIGIT_PREFIX = "_"


def _slugify(label: str) -> str:
    ascii_label = (
        unicodedata.normalize("NFKD", label)
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    return _SEPARATOR_RUN.sub("-", ascii_label.lower()).strip("-")


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def identifier(label: str, lower: bool = False) -> str:
    """Map *label* to a PascalCase identifier, or camelCase with *lower*.

    ``"Living Room Light"`` -> ``LivingRoomLight`` / ``livingRoomLight``.
    A leading digit gets a ``_`` prefix and a keyword gets a ``_`` suffix.
    The lower variant never equals the PascalCase variant, so an accessor
    function can sit next to its namespace class in one module.
    """
    slug = _slugify(_APOSTROPHES.sub("", label))
    name = "".join(part[:1].upper() + part[1:] for part in slug.split("-"))
    if name[:1].isdigit():
        name = DIGIT_PREFIX + name
    type_name = _legal(name)
    if not lower:
        return type_name
    value_name = _legal(lower_first(name))
    if value_name and value_name == type_name:
        value_name += "_"
    return value_name


def _legal(name: str) -> str:
    if keyword.iskeyword(name):
        return name + "_"
    return name


def identifier_sort_key(entity_id: str) -> tuple[str, str]:
    """Order entities by resolved identifier, then by raw id for ties."""
    return (identifier(entity_id), entity_id)
