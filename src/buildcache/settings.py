"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Build cache settings and explicit config loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ROOT = ".cache/data"


def _env(name: str, default: str | None = None) -> str | None:
    """Return the stripped value of `name`, or `default` when unset or blank."""
    value = (os.getenv(name) or "").strip()
    return value or default


def _parse_timeout_ms(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"BUILDCACHE_TIMEOUT_MS must be a number, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"BUILDCACHE_TIMEOUT_MS must be >= 0, got {raw!r}")
    return value


@dataclass(frozen=True, slots=True)
class CacheSettings:
    """Explicit settings used to build a cache store and memoizer."""

    backend: str = "filesystem"
    root: Path = Path(DEFAULT_ROOT)
    default_timeout_ms: float | None = None

    @staticmethod
    def from_env() -> "CacheSettings":
        """Load settings from `BUILDCACHE_*` environment variables."""
        return CacheSettings(
            backend=_env("BUILDCACHE_BACKEND", "filesystem").lower(),
            root=Path(_env("BUILDCACHE_ROOT", DEFAULT_ROOT)),
            default_timeout_ms=_parse_timeout_ms(_env("BUILDCACHE_TIMEOUT_MS")),
        )
