"""Expiring key-value cache for resolved diagram URIs."""

import time
from typing import Callable, Dict, Generic, Optional, Protocol, Tuple, TypeVar

V = TypeVar("V")


class UriCache(Protocol):
    """Protocol for caches consulted by the URI resolver."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str, ttl: float) -> None: ...


class ExpiringCache(Generic[V]):
    """
    In-memory cache where every entry expires a fixed time after insertion.

    Expired entries are dropped when they are read and on every insert. There
    is no locking around lookups and inserts; concurrent misses for one key
    each fill the entry.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the cache.

        :param clock: returns current time in seconds
        """
        self.clock = clock
        self._entries: Dict[str, Tuple[float, V]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> Optional[V]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self.clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: V, ttl: float) -> None:
        now = self.clock()
        self.purge(now)
        self._entries[key] = (now + ttl, value)

    def purge(self, now: Optional[float] = None) -> None:
        """Drop all expired entries."""
        if now is None:
            now = self.clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()
