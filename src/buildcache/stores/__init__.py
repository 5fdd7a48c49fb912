"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: stores/__init__.py.
"""

from .base import CacheStore
from .factory import create_cache_store, create_cache_store_from_env
from .filesystem import FileCacheStore
from .inmemory import InMemoryCacheStore

__all__ = [
    "CacheStore",
    "FileCacheStore",
    "InMemoryCacheStore",
    "create_cache_store",
    "create_cache_store_from_env",
]
