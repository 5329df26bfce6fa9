"""Thread-safe in-memory caches.

InMemoryCache keeps the most recently used entries up to ``max_size``
and tracks hit/miss statistics. NullCache never stores anything and is
used when memoisation is turned off.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Bounded least-recently-used cache.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[ItineraryResult](name="itineraries", max_size=128)
        result = cache.get_or_compute(key, lambda: solve(key))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: "OrderedDict[Hashable, T]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._store.move_to_end(key)
            self._hits += 1
            return self._store[key]

    def set(self, key: Hashable, value: T) -> None:
        with self._lock:
            self._store[key] = value
            self._store.move_to_end(key)
            if self.max_size is not None and len(self._store) > self.max_size:
                evicted, _ = self._store.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": repr(evicted), "reason": "max_size"},
                )

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Return the cached value for ``key``, computing and storing it on a miss.

        ``compute_fn`` runs outside the lock; exceptions it raises
        propagate and nothing is cached.
        """
        value = self.get(key)
        if value is not None:
            return value

        self._logger.debug("Cache miss, computing", extra={"key": repr(key)})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
        self._logger.info("Cache cleared", extra={"entries_cleared": count})
        return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts, hit rate and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }


@dataclass
class NullCache(Generic[T]):
    """Cache that stores nothing; every lookup is a miss."""

    def get(self, key: Hashable) -> Optional[T]:
        return None

    def set(self, key: Hashable, value: T) -> None:
        pass

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0
