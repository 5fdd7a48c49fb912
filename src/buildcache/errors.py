"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Exceptions raised by the build cache and its stores.

Producer exceptions are never wrapped: they reach the caller of the memoized
function unchanged.
"""

from __future__ import annotations


class BuildCacheError(RuntimeError):
    """Base class for cache-layer failures."""


class CacheKeyError(BuildCacheError, ValueError):
    """Raised when a key is empty or resolves outside the store root."""


class CacheSerializationError(BuildCacheError):
    """Raised when a produced value cannot be encoded as JSON."""


class CacheStoreError(BuildCacheError):
    """Raised when the underlying store fails to read, write, or delete."""


class CacheMissError(CacheStoreError):
    """Raised by `CacheStore.get` when no entry exists for the key."""


class CacheCorruptedEntryError(CacheStoreError):
    """Raised when a stored entry is not valid serialized data."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Cache entry '{key}' is corrupted: {reason}")
        self.key = key
