"""Cache port - Injectable caching abstraction.

Used by the planner service to memoise itinerary queries against an
unchanged schedule.
"""

from __future__ import annotations

from typing import Callable, Hashable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/memory_cache.py (NullCache) - Caching disabled
    """

    def get(self, key: Hashable) -> Optional[T]:
        """Get a value from the cache.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if not found.
        """
        ...

    def set(self, key: Hashable, value: T) -> None:
        """Set a value in the cache."""
        ...

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        ...
