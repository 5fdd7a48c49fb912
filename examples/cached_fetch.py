"""
cached_fetch.py: memoize a slow fetch across build runs.

The first run sleeps to simulate an external API call and writes
`.cache/data/releases.json`; later runs within the hour are served from disk.

Usage:
    python examples/cached_fetch.py
    python -m buildcache list
"""

import asyncio
import logging

from buildcache import FileCacheStore, MemoizingCache


async def fetch_releases() -> list[dict[str, str]]:
    await asyncio.sleep(1.0)
    return [{"tag": "v1.0.0"}, {"tag": "v1.1.0"}]


async def main() -> None:
    cache = MemoizingCache(FileCacheStore(".cache/data"))
    releases = cache.wrap("releases", fetch_releases, cache_timeout_ms=3_600_000)

    print(await releases())
    print(await releases())
    print(cache.stats.to_dict())


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
