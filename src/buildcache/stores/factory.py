"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Factory helpers for selecting cache stores from settings or the environment.
"""

from __future__ import annotations

from ..settings import CacheSettings
from .base import CacheStore
from .filesystem import FileCacheStore
from .inmemory import InMemoryCacheStore


def create_cache_store(settings: CacheSettings | None = None) -> CacheStore:
    """
    Create a cache store from `settings` (defaults: filesystem at `.cache/data`).

    Backends:
    - `filesystem` (default; aliases `file`, `fs`, `disk`)
    - `inmemory` (aliases `mem`, `memory`, `in_memory`)
    """
    settings = settings or CacheSettings()
    backend = settings.backend.strip().lower()

    if backend in ("filesystem", "file", "fs", "disk"):
        return FileCacheStore(settings.root)

    if backend in ("mem", "memory", "inmemory", "in_memory"):
        return InMemoryCacheStore()

    raise ValueError(f"Unknown BUILDCACHE_BACKEND: {backend}")


def create_cache_store_from_env() -> CacheStore:
    """Create a cache store from `BUILDCACHE_*` environment variables."""
    return create_cache_store(CacheSettings.from_env())
