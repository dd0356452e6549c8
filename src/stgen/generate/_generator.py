"""Assembly of the four generated modules from a catalog snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from stgen.errors import GenerationError
from stgen.model import CatalogSnapshot

from ._capabilities import CapabilitiesWriter
from ._devices import DevicesWriter
from ._locations import LocationsWriter
from ._naming import NamingContext
from ._scenes import ScenesWriter


logger = logging.getLogger(__name__)

FILE_NAMES = ("capabilities.py", "devices.py", "scenes.py", "locations.py")


@dataclass(frozen=True)
class GeneratedFile:
    file_name: str
    source: str


def generate(snapshot: CatalogSnapshot) -> list[GeneratedFile]:
    """Emit ``capabilities.py``, ``devices.py``, ``scenes.py`` and ``locations.py``.

    All-or-nothing: the modules reference each other by name, so any error
    aborts the whole run.  Output depends only on *snapshot*; list ordering
    inside the snapshot does not matter.
    """
    missing = snapshot.missing_capabilities()
    if missing:
        refs = ", ".join(f"{cap_id}/{version}" for cap_id, version in missing)
        raise GenerationError(f"Capability definitions missing from the catalog: {refs}")

    naming = NamingContext()

    capabilities = CapabilitiesWriter()
    capabilities.write_module(snapshot.capabilities)

    # devices are named here; locations refer to those names
    devices = DevicesWriter()
    devices.write_module(snapshot.devices, naming)

    scenes = ScenesWriter()
    scenes.write_module(snapshot.scenes, naming)

    locations = LocationsWriter()
    locations.write_module(snapshot, naming)

    sources = [capabilities.getvalue(), devices.getvalue(), scenes.getvalue(), locations.getvalue()]
    logger.info(
        "Generated modules for %d capabilities, %d devices, %d scenes, %d locations",
        len(snapshot.capabilities),
        len(snapshot.devices),
        len(snapshot.scenes),
        len(snapshot.locations),
    )
    return [GeneratedFile(name, source) for name, source in zip(FILE_NAMES, sources)]


def write_files(files: list[GeneratedFile], output_dir: str | Path) -> list[Path]:
    """Write *files* into *output_dir*, making it an importable package."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    package_init = out / "__init__.py"
    if not package_init.exists():
        package_init.write_text("", encoding="utf-8")
    written: list[Path] = []
    for f in files:
        path = out / f.file_name
        path.write_text(f.source, encoding="utf-8")
        logger.info("Wrote %s", path)
        written.append(path)
    return written
