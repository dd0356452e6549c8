"""stgen generate — typed client modules from a catalog snapshot.

Public API::

    from stgen.generate import generate, write_files
    files = generate(snapshot)
    write_files(files, "my_home")
"""

from ._generator import FILE_NAMES, GeneratedFile, generate, write_files
from ._identifiers import identifier, lower_first
from ._naming import NO_ROOM, AssignedName, NameScope, NamingContext
from ._types import SchemaTypeMapper, canonical_json
from ._writer import SourceWriter

__all__ = [
    "FILE_NAMES",
    "NO_ROOM",
    "AssignedName",
    "GeneratedFile",
    "NameScope",
    "NamingContext",
    "SchemaTypeMapper",
    "SourceWriter",
    "canonical_json",
    "generate",
    "identifier",
    "lower_first",
    "write_files",
]
