"""Python source writer shared by the module emitters.

Walks type IR and catalog records and emits Python source text into an
internal buffer.  Output is fully determined by the input: dict payloads
are written with sorted keys and every collection is written in the order
the caller hands it over (callers sort).
"""

from __future__ import annotations

import json
from io import StringIO
from pprint import pformat
from typing import Any

from stgen.model import (
    AnyTypeRef,
    LiteralTypeRef,
    MappingTypeRef,
    NamedTypeRef,
    NumberTypeRef,
    SequenceTypeRef,
    StringTypeRef,
    StructType,
    TypeRef,
)


GENERATED_NOTICE = "Generated by stgen from the SmartThings API.  Do not edit."


def quote(text: str) -> str:
    """A Python string literal for *text*."""
    return json.dumps(text)


def doc_text(text: str) -> str:
    """Make free text safe inside a triple-quoted docstring."""
    return " ".join(text.replace("\\", "\\\\").replace('"', '\\"').split())


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return quote(str(value))


# ---------------------------------------------------------------------------
# SourceWriter
# ---------------------------------------------------------------------------

class SourceWriter:
    """Indentation-aware buffer plus the constructs every module needs."""

    def __init__(self) -> None:
        self._buf = StringIO()
        self._indent = 0
        self._indent_str = "    "

    def getvalue(self) -> str:
        return self._buf.getvalue().rstrip("\n") + "\n"

    # -- Low-level output helpers -------------------------------------------

    def _line(self, text: str = "") -> None:
        if text:
            self._buf.write(self._indent_str * self._indent + text + "\n")
        else:
            self._buf.write("\n")

    def _indent_inc(self) -> None:
        self._indent += 1

    def _indent_dec(self) -> None:
        self._indent = max(0, self._indent - 1)

    # ======================================================================
    # Module structure
    # ======================================================================

    def write_header(self, title: str, imports: list[str]) -> None:
        self._line(f'"""{title}')
        self._line()
        self._line(GENERATED_NOTICE)
        self._line('"""')
        self._line()
        self._line("from __future__ import annotations")
        self._line()
        for statement in imports:
            self._line(statement)

    def write_docstring(self, *paragraphs: str) -> None:
        paragraphs = tuple(p for p in paragraphs if p)
        if not paragraphs:
            return
        if len(paragraphs) == 1:
            self._line(f'"""{paragraphs[0]}"""')
            return
        self._line(f'"""{paragraphs[0]}')
        for p in paragraphs[1:]:
            self._line()
            self._line(p)
        self._line('"""')

    def write_raw(self, name: str, payload: Any) -> None:
        """Embed a JSON payload as a Python literal with sorted keys."""
        lines = pformat(payload, width=88, sort_dicts=True).splitlines()
        if len(lines) == 1:
            self._line(f"{name} = {lines[0]}")
            return
        self._line(f"{name} = (")
        self._indent_inc()
        for text in lines:
            self._line(text)
        self._indent_dec()
        self._line(")")

    # ======================================================================
    # Structural types
    # ======================================================================

    def write_struct(self, struct: StructType) -> None:
        """Write *struct* as a functional ``TypedDict``.

        The functional form is used throughout because wire keys (capability
        ids such as ``custom.disabledCapabilities``) are not identifiers.
        """
        if struct.description:
            self._line(f"# {' '.join(struct.description.split())}")
        self._line(f"{struct.name} = TypedDict(")
        self._indent_inc()
        self._line(f"{quote(struct.name)},")
        if not struct.fields:
            self._line("{},")
        else:
            self._line("{")
            self._indent_inc()
            for f in struct.fields:
                if f.description:
                    self._line(f"# {f.description}")
                annotation = self.type_expr(f.data_type)
                if not f.required:
                    annotation = f"NotRequired[{annotation}]"
                self._line(f"{quote(f.key)}: {annotation},")
            self._indent_dec()
            self._line("},")
        self._indent_dec()
        self._line(")")

    # ======================================================================
    # Type references
    # ======================================================================

    @classmethod
    def type_expr(cls, tr: TypeRef, qualifier: str = "") -> str:
        """Render a type expression; *qualifier* prefixes struct names."""
        if isinstance(tr, LiteralTypeRef):
            return f"Literal[{', '.join(_literal(v) for v in tr.values)}]"
        if isinstance(tr, StringTypeRef):
            return "str"
        if isinstance(tr, NumberTypeRef):
            return "float"
        if isinstance(tr, AnyTypeRef):
            return "Any"
        if isinstance(tr, MappingTypeRef):
            return "dict[str, Any]"
        if isinstance(tr, SequenceTypeRef):
            return f"list[{cls.type_expr(tr.element_type, qualifier)}]"
        if isinstance(tr, NamedTypeRef):
            return f"{qualifier}{tr.name}"
        raise TypeError(f"Unknown type reference {type(tr).__name__}")
