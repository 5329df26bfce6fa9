"""Cache adapters - Implementations of the CachePort.

Available implementations:
- InMemoryCache: Thread-safe bounded LRU cache
- NullCache: No-op cache (always misses)
"""

from .memory_cache import InMemoryCache, NullCache

__all__ = ["InMemoryCache", "NullCache"]
