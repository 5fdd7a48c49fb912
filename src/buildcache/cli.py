"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Command line utility to inspect and clear a build cache directory.

Usage examples:
  python -m buildcache list
  python -m buildcache --root .cache/data prune --older-than-ms 3600000
  python -m buildcache clear
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence

from .codec import decode_value
from .errors import BuildCacheError, CacheMissError
from .memoize import MemoizingCache
from .settings import CacheSettings
from .stores.filesystem import FileCacheStore


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="buildcache", description="Inspect and clear a build cache directory"
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Store root (defaults to BUILDCACHE_ROOT or .cache/data)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List cached keys with their age")

    prune = sub.add_parser("prune", help="Delete entries older than a timeout")
    prune.add_argument("--older-than-ms", type=float, required=True)

    sub.add_parser("clear", help="Delete every entry")

    show = sub.add_parser("show", help="Print the stored value for a key")
    show.add_argument("key")
    return parser.parse_args(argv)


async def run_command(args: argparse.Namespace, cache: MemoizingCache) -> None:
    store = cache.store
    if args.command == "list":
        for key in await store.keys():
            age_ms = await store.stat_age_ms(key)
            if age_ms is None:
                continue
            print(f"{key}\t{age_ms / 1000.0:.1f}s")
    elif args.command == "prune":
        for key in await cache.prune_expired(args.older_than_ms):
            print(key)
    elif args.command == "clear":
        print(await cache.clear())
    elif args.command == "show":
        if not await store.has(args.key):
            raise CacheMissError(f"No cache entry for key '{args.key}'")
        value = decode_value(await store.get(args.key), key=args.key)
        print(json.dumps(value, indent=2, ensure_ascii=False))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = CacheSettings.from_env()
        cache = MemoizingCache(FileCacheStore(args.root or settings.root))
        asyncio.run(run_command(args, cache))
    except (BuildCacheError, ValueError) as exc:
        print(f"buildcache: {exc}", file=sys.stderr)
        return 1
    return 0
