# -*- coding: utf-8 -*-
"""
Keyed lazy-loading option cache

A key (usually a part type) is fetched only when someone asks for it, and
concurrent callers for the same key share one fetch.
"""
import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional

from catalog_admin.models import CacheEntry
from catalog_admin.services.fetchers import PageFetcher

logger = logging.getLogger(__name__)


class UnknownCacheKeyError(KeyError):
    """No fetcher is bound to the requested key"""


class OptionCache:
    """Single-flight cache of the first batch of each key"""

    def __init__(self, fetchers: Mapping[str, PageFetcher] = None, batch_size: int = 10):
        self._fetchers: Dict[str, PageFetcher] = dict(fetchers or {})
        self.batch_size = batch_size
        self._entries: Dict[str, CacheEntry] = {}
        self._inflight: Dict[str, asyncio.Future] = {}
        self._version = 0

    def bind(self, key: str, fetcher: PageFetcher) -> None:
        """Register the fetcher used for a key, nothing is fetched yet"""
        self._fetchers[key] = fetcher

    def is_bound(self, key: str) -> bool:
        return key in self._fetchers

    def entry(self, key: str) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def get(self, key: str) -> Optional[List[Any]]:
        """Loaded options for a key, None while missing or loading"""
        entry = self._entries.get(key)
        if entry is None or entry.loading:
            return None
        return list(entry.options)

    def is_loading(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry.loading

    async def ensure_loaded(self, key: str) -> List[Any]:
        entry = self._entries.get(key)
        if entry is not None and not entry.loading:
            logger.debug(f"Option cache hit: {key}")
            return list(entry.options)

        task = self._inflight.get(key)
        if task is not None:
            logger.debug(f"Option cache join in-flight load: {key}")
        else:
            fetcher = self._fetchers.get(key)
            if fetcher is None:
                raise UnknownCacheKeyError(key)

            entry = CacheEntry(key=key, loading=True)
            self._entries[key] = entry
            logger.info(f"Option cache miss, loading: {key}")
            # The load runs in its own task, a cancelled caller only stops waiting
            task = asyncio.ensure_future(self._load(key, entry, fetcher))
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._load_finished(key, done))

        return list(await asyncio.shield(task))

    async def _load(self, key: str, entry: CacheEntry, fetcher: PageFetcher) -> List[Any]:
        try:
            page = await fetcher.fetch(1, self.batch_size)
            self._version += 1
            entry.options = list(page.items)
            entry.loading = False
            entry.loaded_at = self._version
            return entry.options
        except Exception as e:
            logger.error(f"Option cache load failed for {key}: {e}")
            raise
        finally:
            # Failed or cancelled loads leave nothing behind, the next call retries
            if entry.loading and self._entries.get(key) is entry:
                del self._entries[key]

    def _load_finished(self, key: str, task: asyncio.Future) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled():
            # Mark retrieved, waiters (if any) still get the exception
            task.exception()

    def invalidate(self, key: str) -> None:
        """Drop a key so the next ensure_loaded fetches it again"""
        self._entries.pop(key, None)
        self._inflight.pop(key, None)
        logger.info(f"Option cache invalidated: {key}")

    def clear(self) -> None:
        self._entries.clear()
        self._inflight.clear()
