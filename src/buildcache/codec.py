"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

JSON encoding for cache entry values.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from .errors import CacheCorruptedEntryError, CacheSerializationError
from .types import JSONValue


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


def encode_value(value: Any) -> str:
    """
    Serialize `value` to JSON text.

    Pydantic models are dumped in JSON mode. NaN and infinities are rejected
    instead of being written as non-standard tokens.

    Raises:
        CacheSerializationError: If the value is cyclic or not representable.
    """
    try:
        return json.dumps(_to_jsonable(value), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise CacheSerializationError(
            f"Value of type {type(value).__name__} is not JSON serializable: {exc}"
        ) from exc


def decode_value(text: str, *, key: str) -> JSONValue:
    """Parse stored JSON text for `key`."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CacheCorruptedEntryError(key, str(exc)) from exc
