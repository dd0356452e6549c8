"""Admission and retry policies applied to every remote call.

A call is run as ``retry(throttle(call))``: each attempt takes a throttle
slot for the duration of the request only, so a call waiting out its
backoff does not hold a slot.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from stgen.errors import StgenError


logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFn = Callable[[float], Awaitable[Any]]


class Throttle:
    """Global cap on concurrently running remote calls.

    ``in_flight`` and ``peak`` count admitted calls; ``peak`` never exceeds
    ``limit``.
    """

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError(f"Throttle limit must be at least 1, got {limit}")
        self.limit = limit
        self.in_flight = 0
        self.peak = 0
        self._slots = asyncio.Semaphore(limit)

    async def run(self, call: Callable[[], Awaitable[T]]) -> T:
        async with self._slots:
            self.in_flight += 1
            self.peak = max(self.peak, self.in_flight)
            try:
                return await call()
            finally:
                self.in_flight -= 1


def retry_policy(
    max_attempts: int = 5,
    base_delay: float = 1.0,
    sleep: SleepFn = asyncio.sleep,
) -> AsyncRetrying:
    """At most *max_attempts* attempts with randomized doubling backoff.

    Before attempt ``n + 1`` the wait is ``random() * base_delay * 2**(n - 1)``
    seconds.  When attempts run out the last exception is re-raised as is.
    Errors that no retry can fix (bad payloads, unsupported schemas) are
    raised on the first attempt.
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_random_exponential(multiplier=base_delay),
        retry=retry_if_not_exception_type((StgenError, ValidationError)),
        sleep=sleep,
        reraise=True,
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
