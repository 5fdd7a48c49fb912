"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: stores/base.py.
"""

from __future__ import annotations

from typing import Protocol

from ..errors import CacheKeyError


class CacheStore(Protocol):
    """Protocol implemented by key/value stores holding serialized entries."""

    store_id: str

    async def has(self, key: str) -> bool: ...

    async def get(self, key: str) -> str: ...

    async def put(self, key: str, text: str) -> None: ...

    async def delete(self, key: str) -> bool: ...

    async def stat_age_ms(self, key: str) -> float | None: ...

    async def keys(self) -> list[str]: ...

    async def clear(self) -> int: ...


def validate_key(key: str) -> str:
    """Return `key` unchanged, rejecting empty keys."""
    if not isinstance(key, str) or not key.strip():
        raise CacheKeyError("Cache key must be a non-empty string")
    return key
