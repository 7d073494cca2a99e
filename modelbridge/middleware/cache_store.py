"""Cache storage for ``CachingMiddleware``.

``CacheStore`` is the async key/value contract; ``InMemoryCacheStore`` is a
process-local implementation with per-entry TTL and a size bound that evicts
the oldest entry first.
"""
from __future__ import annotations

import time
from threading import Lock
from typing import Callable, Dict, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str, ttl_seconds: Optional[float] = None) -> None: ...


class InMemoryCacheStore:
    """Thread-safe dict-backed store.

    Entries are ``(value, expires_at, stored_at)`` tuples keyed by cache key;
    expired entries are dropped lazily on read.
    """

    def __init__(
        self,
        max_entries: int = 1024,
        default_ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._default_ttl = default_ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[str, Optional[float], float]] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> Optional[str]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at, _ = entry
            if expires_at is not None and now >= expires_at:
                del self._entries[key]
                return None
            return value

    async def set(self, key: str, value: str, ttl_seconds: Optional[float] = None) -> None:
        now = self._clock()
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        expires_at = now + ttl if ttl is not None else None
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_entries:
                oldest = min(self._entries.items(), key=lambda item: item[1][2])[0]
                del self._entries[oldest]
            self._entries[key] = (value, expires_at, now)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


__all__ = ["CacheStore", "InMemoryCacheStore"]
