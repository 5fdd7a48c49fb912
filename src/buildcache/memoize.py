"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Memoize asynchronous producers into a persistent cache store.

Wrapping a producer avoids repeated expensive calls (for example external API
fetches that are rate limited) during a build:

    cache = MemoizingCache(FileCacheStore(".cache/data"))
    fetch_posts = cache.wrap("posts", fetch_posts_from_api)

    await fetch_posts()  # runs the producer and stores the result
    await fetch_posts()  # served from `.cache/data/posts.json`

Expiry is lazy: an entry older than its timeout is removed when it is next
read. Use `prune_expired` to evict stale entries eagerly.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .codec import decode_value, encode_value
from .errors import CacheMissError
from .settings import CacheSettings
from .stores.base import CacheStore, validate_key
from .stores.factory import create_cache_store
from .stores.filesystem import FileCacheStore
from .types import CachePolicy, CacheStats, Producer, T

logger = logging.getLogger("buildcache.memoize")


class MemoizingCache:
    """Serve producer results from `store` while they are fresh."""

    def __init__(
        self,
        store: CacheStore,
        *,
        default_timeout_ms: float | None = None,
        stats: CacheStats | None = None,
    ) -> None:
        self._store = store
        self._default_timeout_ms = default_timeout_ms
        self.stats = stats or CacheStats()

    @classmethod
    def from_settings(cls, settings: CacheSettings | None = None) -> "MemoizingCache":
        """Build a cache from explicit settings, or from the environment."""
        settings = settings or CacheSettings.from_env()
        return cls(
            create_cache_store(settings),
            default_timeout_ms=settings.default_timeout_ms,
        )

    @property
    def store(self) -> CacheStore:
        return self._store

    def wrap(
        self,
        key: str,
        producer: Producer[T],
        *,
        cache_timeout_ms: float | None = None,
        response_model: type[BaseModel] | None = None,
    ) -> Callable[[], Awaitable[T]]:
        """
        Return a coroutine function serving `producer`'s result from the store.

        Args:
            key: Unique identifier of the cached result.
            producer: Zero-argument coroutine function computing the value.
            cache_timeout_ms: Maximum entry age before regeneration. Falls back
                to the cache default; `None` for both means entries never expire.
            response_model: Optional pydantic model used to revalidate cache hits.

        Producer exceptions propagate unchanged and leave no entry behind.
        """
        validate_key(key)
        timeout_ms = (
            cache_timeout_ms if cache_timeout_ms is not None else self._default_timeout_ms
        )
        policy = CachePolicy(cache_timeout_ms=timeout_ms)

        @functools.wraps(producer)
        async def cached() -> T:
            return await self._resolve(key, producer, policy, response_model)

        return cached

    def memoize(
        self,
        key: str,
        *,
        cache_timeout_ms: float | None = None,
        response_model: type[BaseModel] | None = None,
    ) -> Callable[[Producer[T]], Callable[[], Awaitable[T]]]:
        """Decorator form of `wrap`."""

        def decorator(producer: Producer[T]) -> Callable[[], Awaitable[T]]:
            return self.wrap(
                key,
                producer,
                cache_timeout_ms=cache_timeout_ms,
                response_model=response_model,
            )

        return decorator

    async def invalidate(self, key: str) -> bool:
        """Delete the entry for `key`; return whether one existed."""
        removed = await self._store.delete(key)
        if removed:
            logger.info("Cache entry invalidated: %s", key)
        return removed

    async def prune_expired(self, cache_timeout_ms: float) -> list[str]:
        """Delete every entry older than `cache_timeout_ms`; return removed keys."""
        policy = CachePolicy(cache_timeout_ms=cache_timeout_ms)
        removed: list[str] = []
        for key in await self._store.keys():
            age_ms = await self._store.stat_age_ms(key)
            if age_ms is None or not policy.is_expired(age_ms):
                continue
            if await self._store.delete(key):
                self.stats.expirations += 1
                removed.append(key)
        if removed:
            logger.info("Pruned %d stale cache entries", len(removed))
        return removed

    async def clear(self) -> int:
        """Delete every entry; return how many were removed."""
        count = await self._store.clear()
        logger.info("Cleared %d cache entries", count)
        return count

    async def _resolve(
        self,
        key: str,
        producer: Producer[T],
        policy: CachePolicy,
        response_model: type[BaseModel] | None,
    ) -> Any:
        age_ms = await self._store.stat_age_ms(key)
        if age_ms is None:
            logger.info("Cache miss, running producer for the first time: %s", key)
        elif policy.is_expired(age_ms):
            await self._store.delete(key)
            self.stats.expirations += 1
            logger.info("Stale cache entry removed: %s (age %.0f ms)", key, age_ms)
        else:
            try:
                text = await self._store.get(key)
            except CacheMissError:
                # Removed between the age check and the read.
                logger.info("Cache entry vanished before read, running producer: %s", key)
            else:
                value = decode_value(text, key=key)
                self.stats.hits += 1
                logger.debug("Cache hit: %s", key)
                if response_model is not None:
                    return response_model.model_validate(value)
                return value

        self.stats.misses += 1
        value = await producer()
        text = encode_value(value)
        await self._store.put(key, text)
        self.stats.writes += 1
        logger.debug("Producer result cached: %s", key)
        return value


def cache_async_fn(
    key: str,
    fn: Producer[T],
    *,
    cache_timeout_ms: float | None = None,
    root: str | Path | None = None,
) -> Callable[[], Awaitable[T]]:
    """
    Memoize `fn` under `key` in a filesystem store.

    The store root is `root` when given, otherwise `BUILDCACHE_ROOT` (default
    `.cache/data` relative to the working directory). The default timeout
    also comes from the environment when `cache_timeout_ms` is omitted.
    """
    settings = CacheSettings.from_env()
    store = FileCacheStore(root if root is not None else settings.root)
    cache = MemoizingCache(store, default_timeout_ms=settings.default_timeout_ms)
    return cache.wrap(key, fn, cache_timeout_ms=cache_timeout_ms)
