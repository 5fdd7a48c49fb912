"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Build-time memoization of asynchronous producers.

Quick start::

    from buildcache import FileCacheStore, MemoizingCache

    cache = MemoizingCache(FileCacheStore(".cache/data"))
    cached_fetch = cache.wrap("releases", fetch_releases, cache_timeout_ms=3_600_000)

    await cached_fetch()  # fetches and caches
    await cached_fetch()  # returns the cached data without re-fetching
"""

from .codec import decode_value, encode_value
from .errors import (
    BuildCacheError,
    CacheCorruptedEntryError,
    CacheKeyError,
    CacheMissError,
    CacheSerializationError,
    CacheStoreError,
)
from .memoize import MemoizingCache, cache_async_fn
from .settings import CacheSettings
from .stores import (
    CacheStore,
    FileCacheStore,
    InMemoryCacheStore,
    create_cache_store,
    create_cache_store_from_env,
)
from .types import CachePolicy, CacheStats, JSONValue

__all__ = [
    "MemoizingCache",
    "cache_async_fn",
    "CacheSettings",
    "CachePolicy",
    "CacheStats",
    "JSONValue",
    "CacheStore",
    "FileCacheStore",
    "InMemoryCacheStore",
    "create_cache_store",
    "create_cache_store_from_env",
    "encode_value",
    "decode_value",
    "BuildCacheError",
    "CacheCorruptedEntryError",
    "CacheKeyError",
    "CacheMissError",
    "CacheSerializationError",
    "CacheStoreError",
]
