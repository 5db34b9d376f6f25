"""Read-through cache with a fixed staleness window.

A value is served from memory while it is younger than the TTL. Once it is
older, the next request refreshes it; if that refresh fails, the previous
value keeps being served until a refresh succeeds. Entries are never evicted.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, TypeVar

DEFAULT_TTL_MILLIS = 5 * 60 * 1000

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def _now_millis() -> int:
    return int(datetime.now(tz=UTC).timestamp() * 1000)


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the time of the fetch that produced it."""

    key: str
    value: Any
    fetched_at_millis: int


class CachedFetcher(Protocol):
    """Read-through cache interface."""

    async def get_or_fetch(
        self,
        key: str,
        fetch_fn: Callable[[], Awaitable[Any]],
        transform_fn: Callable[[Any], T],
        ttl_millis: int = DEFAULT_TTL_MILLIS,
    ) -> T:
        """Return a fresh cached value, or fetch, transform and store a new one."""

    def get_entry(self, key: str) -> CacheEntry | None:
        """Return the stored entry for a key, if any."""


@dataclass
class InMemoryCachedFetcher(CachedFetcher):
    """In-process cache keyed by resource name.

    Concurrent calls for the same key are not merged. Each one fetches on its
    own and whichever finishes last owns the entry.
    """

    clock: Callable[[], int] = _now_millis
    _entries: dict[str, CacheEntry] = field(default_factory=dict, init=False, repr=False)

    async def get_or_fetch(
        self,
        key: str,
        fetch_fn: Callable[[], Awaitable[Any]],
        transform_fn: Callable[[Any], T],
        ttl_millis: int = DEFAULT_TTL_MILLIS,
    ) -> T:
        """Return the cached value for ``key``, refreshing it when stale.

        A failed refresh falls back to the stale value when one exists and
        re-raises otherwise.
        """
        if ttl_millis <= 0:
            raise ValueError("ttl_millis must be positive")

        now = self.clock()
        entry = self._entries.get(key)
        if entry is not None and now - entry.fetched_at_millis < ttl_millis:
            _logger.debug("Using cached data for %s", key)
            return entry.value

        try:
            _logger.info("Fetching fresh data for %s", key)
            raw = await fetch_fn()
            value = transform_fn(raw)
        except Exception:
            entry = self._entries.get(key)
            if entry is None:
                raise
            _logger.warning(
                "Refresh failed for %s, returning stale cached data", key, exc_info=True
            )
            return entry.value

        self._entries[key] = CacheEntry(key=key, value=value, fetched_at_millis=now)
        return value

    def get_entry(self, key: str) -> CacheEntry | None:
        """Return the stored entry for a key, if any."""
        return self._entries.get(key)
