"""Per-session timeline cache with single-flight resolution.

Concurrent requests for one key share a single resolution task. Callers
await it through ``asyncio.shield``, so a caller that is cancelled never
cancels the shared work; the result still lands in the cache for the
next request.

``clear()`` drops completed entries. A resolution already running stays
in flight, so requests made after the clear join it instead of starting
a second one; its result reaches every awaiter but is not written into
the cleared cache.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from planetary_atlas.models.timeline import TimelineEvent

logger = logging.getLogger("planetary_atlas.timeline.cache")

CacheKey = tuple[str, str]
Timeline = tuple["TimelineEvent", ...]


class TimelineCache:
    """Map of ``(body, feature name)`` to a resolved timeline."""

    def __init__(self) -> None:
        self._entries: dict[CacheKey, Timeline] = {}
        self._inflight: dict[CacheKey, asyncio.Future[Timeline]] = {}
        self._generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: CacheKey) -> Timeline | None:
        """Return the cached timeline for *key*, if resolved."""
        return self._entries.get(key)

    @property
    def inflight_count(self) -> int:
        """Number of resolutions currently running."""
        return len(self._inflight)

    async def get_or_resolve(
        self, key: CacheKey, resolver: Callable[[], Awaitable[Timeline]]
    ) -> Timeline:
        """Return the timeline for *key*, running *resolver* at most once.

        Failures are not cached: every awaiter of a failed resolution
        receives the exception and the next request starts afresh.
        """
        cached = self._entries.get(key)
        if cached is not None:
            logger.debug("Timeline cache hit: %s/%s", *key)
            return cached

        task = self._inflight.get(key)
        if task is None:
            logger.debug("Timeline cache miss, resolving: %s/%s", *key)
            task = asyncio.ensure_future(resolver())
            self._inflight[key] = task
            task.add_done_callback(functools.partial(self._settle, key, self._generation))
        else:
            logger.debug("Joining in-flight resolution: %s/%s", *key)

        return await asyncio.shield(task)

    def clear(self) -> None:
        """Drop every entry. Running resolutions keep their awaiters but are not stored."""
        logger.info(
            "Clearing timeline cache (%d entries, %d in flight)",
            len(self._entries),
            len(self._inflight),
        )
        self._entries.clear()
        self._generation += 1

    def _settle(self, key: CacheKey, generation: int, task: asyncio.Future[Timeline]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if task.cancelled():
            return
        if task.exception() is not None:
            logger.warning("Timeline resolution failed for %s/%s: %s", *key, task.exception())
            return
        if generation == self._generation:
            self._entries[key] = task.result()
