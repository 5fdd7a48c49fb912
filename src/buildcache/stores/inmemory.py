"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: stores/inmemory.py.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from ..errors import CacheMissError
from ..types import Clock
from .base import CacheStore, validate_key


@dataclass(slots=True)
class _Row:
    text: str
    written_at_s: float


@dataclass(slots=True)
class InMemoryCacheStore(CacheStore):
    """Process-local store suitable for tests; age follows the injected clock."""

    store_id: str = "inmemory"
    clock: Clock = field(default=time.time)
    _rows: dict[str, _Row] = field(default_factory=dict, init=False, repr=False)

    async def has(self, key: str) -> bool:
        return validate_key(key) in self._rows

    async def get(self, key: str) -> str:
        row = self._rows.get(validate_key(key))
        if row is None:
            raise CacheMissError(f"No cache entry for key '{key}'")
        return row.text

    async def put(self, key: str, text: str) -> None:
        self._rows[validate_key(key)] = _Row(text=text, written_at_s=self.clock())

    async def delete(self, key: str) -> bool:
        return self._rows.pop(validate_key(key), None) is not None

    async def stat_age_ms(self, key: str) -> float | None:
        row = self._rows.get(validate_key(key))
        if row is None:
            return None
        return (self.clock() - row.written_at_s) * 1000.0

    async def keys(self) -> list[str]:
        return sorted(self._rows)

    async def clear(self) -> int:
        count = len(self._rows)
        self._rows.clear()
        return count
