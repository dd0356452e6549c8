"""stgen acquire — fetch the SmartThings catalog into a ``CatalogSnapshot``.

Public API::

    from stgen.acquire import fetch_catalog
    snapshot = await fetch_catalog(client, max_concurrency=20)
"""

from ._fetcher import CatalogFetcher, fetch_catalog
from ._policies import Throttle, retry_policy
from ._protocols import RemoteSource

__all__ = [
    "CatalogFetcher",
    "RemoteSource",
    "Throttle",
    "fetch_catalog",
    "retry_policy",
]
