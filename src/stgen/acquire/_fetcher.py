"""Catalog acquisition: the whole device graph in one concurrent pass."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, TypeVar

from stgen.model import (
    CapabilityCatalog,
    CapabilityRef,
    CatalogSnapshot,
    Device,
    Location,
    LocationRef,
    Room,
)

from ._policies import SleepFn, Throttle, retry_policy
from ._protocols import RemoteSource


logger = logging.getLogger(__name__)

T = TypeVar("T")


class CatalogFetcher:
    """Fetches devices, scenes, locations, rooms and capability definitions.

    Every distinct ``(capability id, version)`` referenced by a device
    component is fetched exactly once, however many components share it.
    Any call that still fails after retrying aborts the fetch; no partial
    snapshot is returned.
    """

    def __init__(
        self,
        source: RemoteSource,
        *,
        max_concurrency: int = 50,
        max_attempts: int = 5,
        base_delay: float = 1.0,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self.source = source
        self.throttle = Throttle(max_concurrency)
        self._retrying = retry_policy(max_attempts, base_delay, sleep)
        self._max_attempts = max_attempts
        self._reserved: set[tuple[str, int]] = set()
        self._catalog: CapabilityCatalog = {}

    async def fetch(self) -> CatalogSnapshot:
        self._reserved = set()
        self._catalog = {}

        devices, scenes, location_refs = await asyncio.gather(
            self._call(self.source.list_devices, "list devices"),
            self._call(self.source.list_scenes, "list scenes"),
            self._call(self.source.list_location_refs, "list locations"),
        )
        logger.info(
            "Listed %d devices, %d scenes, %d locations",
            len(devices), len(scenes), len(location_refs),
        )

        _, located = await asyncio.gather(
            self._fetch_capabilities(devices),
            asyncio.gather(*(self._fetch_location(ref) for ref in location_refs)),
        )
        logger.info(
            "Fetched %d capability definitions (%d concurrent calls at peak)",
            sum(len(versions) for versions in self._catalog.values()),
            self.throttle.peak,
        )

        return CatalogSnapshot(
            devices=devices,
            capabilities=self._catalog,
            scenes=scenes,
            locations=[location for location, _rooms in located],
            rooms=[room for _location, rooms in located for room in rooms],
        )

    # -- Capabilities -----------------------------------------------------------

    async def _fetch_capabilities(self, devices: list[Device]) -> None:
        refs = [
            ref
            for device in devices
            for component in device.components
            for ref in component.capabilities
        ]
        await asyncio.gather(*(self._fetch_capability(ref) for ref in refs))

    async def _fetch_capability(self, ref: CapabilityRef) -> None:
        # reserve before the first await so concurrent discoveries of the
        # same key issue one request
        if ref.key in self._reserved:
            return
        self._reserved.add(ref.key)
        definition = await self._call(
            partial(self.source.get_capability, ref.id, ref.version),
            f"capability {ref.id}/{ref.version}",
        )
        self._catalog.setdefault(ref.id, {})[ref.version] = definition

    # -- Locations --------------------------------------------------------------

    async def _fetch_location(self, ref: LocationRef) -> tuple[Location, list[Room]]:
        location = await self._call(
            partial(self.source.get_location, ref.location_id),
            f"location {ref.location_id}",
        )
        rooms = await self._call(
            partial(self.source.list_rooms, location.location_id),
            f"rooms of location {location.location_id}",
        )
        return location, rooms

    # -- Policies ---------------------------------------------------------------

    async def _call(self, call: Callable[[], Awaitable[T]], what: str) -> T:
        retrying = self._retrying.copy()
        try:
            return await retrying(self.throttle.run, call)
        except Exception:
            logger.error("Giving up on %s (at most %d attempts)", what, self._max_attempts)
            raise


async def fetch_catalog(source: RemoteSource, **options: Any) -> CatalogSnapshot:
    """Shortcut for ``CatalogFetcher(source, **options).fetch()``."""
    return await CatalogFetcher(source, **options).fetch()
