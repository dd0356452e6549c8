"""One generation run: fetch, generate, write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from stgen.acquire import RemoteSource, fetch_catalog
from stgen.generate import generate, write_files


logger = logging.getLogger(__name__)


async def run(source: RemoteSource, output_dir: str | Path, **options: Any) -> list[Path]:
    """Fetch the catalog from *source* and write the client modules.

    *options* are passed on to ``CatalogFetcher``.  Nothing is written
    unless fetching and generation both succeed.
    """
    snapshot = await fetch_catalog(source, **options)
    files = generate(snapshot)
    written = write_files(files, output_dir)
    logger.info("Wrote %d modules to %s", len(written), output_dir)
    return written
