"""In-memory response cache keyed by request URL.

Entries are never evicted. An entry older than the TTL is reported as a miss
and is overwritten by the next successful fetch for the same URL, so memory
grows with the number of distinct URLs requested over the client's lifetime.

The cache is a plain dict with no locking. It is safe under a single asyncio
event loop; sharing one instance across threads needs external guarding.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import structlog

from dibapi.models.cache import CacheEntry

log = structlog.get_logger()


class ResponseCache:
    """URL -> payload cache with TTL-based staleness."""

    def __init__(self, ttl_ms: int) -> None:
        self.ttl = timedelta(milliseconds=ttl_ms)
        self._entries: dict[str, CacheEntry] = {}

    def get(self, url: str) -> CacheEntry | None:
        """Return the entry for ``url`` if it is fresh, else ``None``."""
        entry = self._entries.get(url)
        if entry is None:
            return None
        if not entry.is_fresh(self.ttl):
            log.debug("cache_stale", url=url)
            return None
        return entry

    def set(self, url: str, data: Any) -> CacheEntry:
        """Store ``data`` for ``url``, replacing any previous entry."""
        entry = CacheEntry(data=data, fetched_at=datetime.now(UTC))
        self._entries[url] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: object) -> bool:
        return url in self._entries
