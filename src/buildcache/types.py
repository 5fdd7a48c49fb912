"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Shared types for the build cache.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from typing import TypeAlias, TypeVar

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]

T = TypeVar("T")

# A zero-argument coroutine function producing the value to memoize.
Producer: TypeAlias = Callable[[], Awaitable[T]]

# Wall clock returning seconds since the epoch, like `time.time`.
Clock: TypeAlias = Callable[[], float]


@dataclass(frozen=True, slots=True)
class CachePolicy:
    """Freshness controls for one wrapped producer."""

    cache_timeout_ms: float | None = None

    def is_expired(self, age_ms: float) -> bool:
        """Return True when an entry of `age_ms` must be regenerated."""
        if self.cache_timeout_ms is None:
            return False
        return age_ms > self.cache_timeout_ms


@dataclass(slots=True)
class CacheStats:
    """Counters for hits, misses, expirations, and writes."""

    hits: int = 0
    misses: int = 0
    expirations: int = 0
    writes: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
