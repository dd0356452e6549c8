"""Emitter for ``capabilities.py``: one namespace per capability and version."""

from __future__ import annotations

from stgen.model import (
    CapabilityCatalog,
    CapabilityDefinition,
    CapabilityStatus,
    CommandArgument,
    NamedTypeRef,
    StructField,
    StructType,
    TypeRef,
)

from ._identifiers import identifier, identifier_sort_key
from ._naming import MODULE_NAMES, RUNTIME_ATTRIBUTES, unique_identifiers
from ._types import SchemaTypeMapper
from ._writer import SourceWriter, doc_text, quote


# Names the emitter itself defines or reads inside every version namespace.
RESERVED_NAMES = ("Status", "Capability", "RAW", "Any", "Literal", "NotRequired", "TypedDict")

_MAX_SIGNATURE = 88


def status_notice(status: str | None) -> str:
    """Docstring notice for a capability that is not plainly live."""
    if status in (CapabilityStatus.DEAD, CapabilityStatus.DEPRECATED):
        return f"Deprecated: capability status is {status}."
    if status == CapabilityStatus.PROPOSED:
        return f"Experimental: capability status is {status}."
    return ""


def capability_namespace(capability_id: str, version: int) -> str:
    """Dotted path of a capability version inside ``capabilities.py``."""
    return f"{identifier(capability_id)}.v{version}"


class CapabilitiesWriter(SourceWriter):

    def write_module(self, catalog: CapabilityCatalog) -> None:
        self.write_header(
            "SmartThings capability clients.",
            [
                "from typing import Any, Literal, NotRequired, TypedDict",
                "",
                "from stgen import runtime",
            ],
        )
        class_names = unique_identifiers(catalog, "Capability", reserved=MODULE_NAMES)
        for capability_id in sorted(catalog, key=identifier_sort_key):
            self._line()
            self._line()
            self.write_capability(class_names[capability_id], capability_id, catalog[capability_id])

    def write_capability(
        self, class_name: str, capability_id: str, versions: dict[int, CapabilityDefinition]
    ) -> None:
        self._line(f"class {class_name}:")
        self._indent_inc()
        self.write_docstring(f'Capability "{doc_text(capability_id)}".')
        for version in sorted(versions):
            self._line()
            self.write_version(class_name, versions[version])
        self._indent_dec()

    def write_version(self, class_name: str, definition: CapabilityDefinition) -> None:
        namespace = f"v{definition.version}"
        qualifier = f"{class_name}.{namespace}."
        title = f"{doc_text(definition.display_name)} v{definition.version}"
        notice = status_notice(definition.status)

        mapper = SchemaTypeMapper(reserved=RESERVED_NAMES)
        status_fields: list[StructField] = []
        for attribute_name in sorted(definition.attributes):
            struct = mapper.map_attribute(
                attribute_name, definition.attributes[attribute_name].schema_
            )
            status_fields.append(
                StructField(key=attribute_name, data_type=NamedTypeRef(name=struct.name), required=True)
            )

        command_names = {key: command.name or key for key, command in definition.commands.items()}
        method_names = unique_identifiers(
            command_names.values(),
            f"{definition.id} command",
            reserved=RUNTIME_ATTRIBUTES,
            lower=True,
        )
        commands: list[tuple[str, str, list[tuple[str, CommandArgument, TypeRef]]]] = []
        for key in sorted(definition.commands):
            command_name = command_names[key]
            command_arguments = definition.commands[key].arguments
            unique_identifiers([arg.name for arg in command_arguments], f"{command_name} argument")
            arguments = [
                (_param_name(arg.name), arg, mapper.map(arg.schema_, f"{command_name} {arg.name}"))
                for arg in command_arguments
            ]
            commands.append((method_names[command_name], command_name, arguments))

        self._line(f"class {namespace}:")
        self._indent_inc()
        self.write_docstring(f"{title}.", notice)
        for struct in mapper.definitions:
            self._line()
            self.write_struct(struct)
        self._line()
        self.write_struct(
            StructType(name="Status", fields=status_fields, description=f"Status type for {title}.")
        )
        self._line()
        self._line("class Capability(runtime.Capability[Status]):")
        self._indent_inc()
        self.write_docstring(f"Rich client for {title}.", notice)
        self._line()
        self.write_raw("RAW", definition.raw())
        for method, command_name, arguments in commands:
            self._line()
            self.write_command(method, command_name, arguments, qualifier)
        self._indent_dec()
        self._indent_dec()

    def write_command(
        self,
        method: str,
        command_name: str,
        arguments: list[tuple[str, CommandArgument, TypeRef]],
        qualifier: str,
    ) -> None:
        params = ["self"]
        keyword_only = False
        for name, arg, tr in arguments:
            annotation = self.type_expr(tr, qualifier)
            if arg.optional:
                if not keyword_only:
                    # later required arguments stay legal as keyword-only
                    params.append("*")
                    keyword_only = True
                params.append(f"{name}: {annotation} | None = None")
            else:
                params.append(f"{name}: {annotation}")

        signature = f"async def {method}({', '.join(params)}) -> dict[str, Any]:"
        if len(signature) + len(self._indent_str) * self._indent <= _MAX_SIGNATURE:
            self._line(signature)
        else:
            self._line(f"async def {method}(")
            self._indent_inc()
            for param in params:
                self._line(f"{param},")
            self._indent_dec()
            self._line(") -> dict[str, Any]:")
        self._indent_inc()
        self.write_docstring(f'Executes "{doc_text(command_name)}" for this capability.')
        values = ", ".join(name for name, _arg, _tr in arguments)
        self._line(f"return await self.execute_command({quote(command_name)}, [{values}])")
        self._indent_dec()


def _param_name(label: str) -> str:
    name = identifier(label, lower=True)
    return "self_" if name == "self" else name
