"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Directory-backed cache store: one `<key>.json` file per entry.

Blocking file operations run in a worker thread so wrapped producers can
share the event loop with cache I/O.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from ..errors import CacheKeyError, CacheMissError, CacheStoreError
from ..types import Clock
from .base import CacheStore, validate_key

logger = logging.getLogger("buildcache.stores.filesystem")

T = TypeVar("T")

ENTRY_SUFFIX = ".json"
_TMP_SUFFIX = ".tmp"


class FileCacheStore(CacheStore):
    """
    Store entries as UTF-8 JSON files under `root`.

    Keys containing `/` map to sub-directories. Writes go to a temporary
    sibling first and are renamed over the entry, so readers never observe a
    partially written file. The root is created lazily on first write.
    """

    store_id = "filesystem"

    def __init__(self, root: str | Path, *, clock: Clock = time.time) -> None:
        self._root = Path(root).resolve()
        self._clock = clock

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        """Return the entry path for `key`, rejecting keys outside the root."""
        validate_key(key)
        target = (self._root / f"{key}{ENTRY_SUFFIX}").resolve()
        if not target.is_relative_to(self._root):
            raise CacheKeyError(f"Cache key escapes the store root: {key!r}")
        return target

    async def has(self, key: str) -> bool:
        path = self.path_for(key)
        return await self._run(path.is_file)

    async def get(self, key: str) -> str:
        path = self.path_for(key)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            raise CacheMissError(f"No cache entry for key '{key}'") from exc
        except OSError as exc:
            raise CacheStoreError(f"Failed to read cache entry '{key}': {exc}") from exc

    async def put(self, key: str, text: str) -> None:
        path = self.path_for(key)
        try:
            await asyncio.to_thread(self._write_atomic, path, text)
        except OSError as exc:
            raise CacheStoreError(f"Failed to write cache entry '{key}': {exc}") from exc

    async def delete(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise CacheStoreError(f"Failed to delete cache entry '{key}': {exc}") from exc
        return True

    async def stat_age_ms(self, key: str) -> float | None:
        path = self.path_for(key)
        try:
            stats = await asyncio.to_thread(path.stat)
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise CacheStoreError(f"Failed to stat cache entry '{key}': {exc}") from exc
        return (self._clock() - stats.st_mtime) * 1000.0

    async def keys(self) -> list[str]:
        return await self._run(self._scan_keys)

    async def clear(self) -> int:
        keys = await self.keys()
        removed = 0
        for key in keys:
            if await self.delete(key):
                removed += 1
        return removed

    def _scan_keys(self) -> list[str]:
        if not self._root.is_dir():
            return []
        out: list[str] = []
        for path in self._root.rglob(f"*{ENTRY_SUFFIX}"):
            if not path.is_file():
                continue
            relative = path.relative_to(self._root).as_posix()
            out.append(relative[: -len(ENTRY_SUFFIX)])
        return sorted(out)

    def _write_atomic(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=_TMP_SUFFIX, dir=path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        logger.debug("Wrote cache file %s", path)

    async def _run(self, fn: Callable[[], T]) -> T:
        try:
            return await asyncio.to_thread(fn)
        except OSError as exc:
            raise CacheStoreError(f"Cache store operation failed: {exc}") from exc
