"""Async HTTP client for the SmartThings REST API.

Implements the read operations the catalog fetcher needs (returning
``stgen.model`` records) and the status / command / event / scene calls
made by generated code.  Errors surface as ``httpx.HTTPStatusError``;
retrying is left to the caller.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from stgen import config
from stgen.model import CapabilityDefinition, Device, Location, LocationRef, Room, Scene


logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    return quote(value, safe="")


class SmartThingsClient:
    """Thin wrapper over ``httpx.AsyncClient`` with bearer authentication.

    Use as an async context manager, or call ``aclose()`` when done.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=(base_url or config.API_URL).rstrip("/") + "/",
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
            timeout=timeout if timeout is not None else config.HTTP_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> SmartThingsClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- Transport helpers ----------------------------------------------------

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        logger.debug("%s %s", method, path)
        response = await self._http.request(method, path.lstrip("/"), json=json)
        response.raise_for_status()
        if not response.content:
            return {}
        return response.json()

    async def _get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def _post(self, path: str, body: Any = None) -> Any:
        return await self._request("POST", path, json=body if body is not None else {})

    async def _list(self, path: str) -> list[dict[str, Any]]:
        """GET every page of a paged listing, following ``_links.next.href``."""
        items: list[dict[str, Any]] = []
        url: str | None = path.lstrip("/")
        while url:
            page = await self._get(url)
            items.extend(page.get("items", []))
            url = ((page.get("_links") or {}).get("next") or {}).get("href")
        return items

    # -- Catalog reads ----------------------------------------------------------

    async def list_devices(self) -> list[Device]:
        return [Device.model_validate(item) for item in await self._list("devices")]

    async def list_scenes(self) -> list[Scene]:
        return [Scene.model_validate(item) for item in await self._list("scenes")]

    async def list_location_refs(self) -> list[LocationRef]:
        return [LocationRef.model_validate(item) for item in await self._list("locations")]

    async def get_location(self, location_id: str) -> Location:
        return Location.model_validate(await self._get(f"locations/{_segment(location_id)}"))

    async def list_rooms(self, location_id: str) -> list[Room]:
        items = await self._list(f"locations/{_segment(location_id)}/rooms")
        return [Room.model_validate({"locationId": location_id, **item}) for item in items]

    async def get_capability(self, capability_id: str, version: int) -> CapabilityDefinition:
        data = await self._get(f"capabilities/{_segment(capability_id)}/{version}")
        return CapabilityDefinition.model_validate(data)

    # -- Runtime operations ----------------------------------------------------

    async def get_device_status(self, device_id: str) -> Any:
        return await self._get(f"devices/{_segment(device_id)}/status")

    async def get_component_status(self, device_id: str, component_id: str) -> Any:
        return await self._get(
            f"devices/{_segment(device_id)}/components/{_segment(component_id)}/status"
        )

    async def get_capability_status(
        self, device_id: str, component_id: str, capability_id: str
    ) -> Any:
        return await self._get(
            f"devices/{_segment(device_id)}/components/{_segment(component_id)}"
            f"/capabilities/{_segment(capability_id)}/status"
        )

    async def execute_commands(
        self, device_id: str, commands: list[dict[str, Any]]
    ) -> dict[str, Any]:
        return await self._post(f"devices/{_segment(device_id)}/commands", {"commands": commands})

    async def create_events(self, device_id: str, events: list[dict[str, Any]]) -> dict[str, Any]:
        return await self._post(f"devices/{_segment(device_id)}/events", {"deviceEvents": events})

    async def execute_scene(self, scene_id: str) -> dict[str, Any]:
        return await self._post(f"scenes/{_segment(scene_id)}/execute")
