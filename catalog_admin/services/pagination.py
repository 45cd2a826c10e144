# -*- coding: utf-8 -*-
"""
Incremental pagination for option lists and tables

PaginationEngine keeps the accumulated items, the page cursor and the
has-more / loading flags. How pages are produced is decided once, at
construction, by the mode object:

- ClientPagination: the full option list is already in memory, each
  load_more reveals one more page of it.
- ServerPagination: each load_more asks a PageFetcher for the next page
  and appends the result.
"""
import asyncio
import logging
import math
from typing import List, Optional

from catalog_admin.config import get_settings
from catalog_admin.models import Option, PaginationState
from catalog_admin.services.fetchers import PageFetcher

logger = logging.getLogger(__name__)


class PaginationMode:
    """Strategy interface of PaginationEngine"""
    name = ""

    def items(self, engine: "PaginationEngine") -> List[Option]:
        raise NotImplementedError

    def has_more(self, engine: "PaginationEngine") -> bool:
        raise NotImplementedError

    def total_items(self, engine: "PaginationEngine") -> int:
        raise NotImplementedError

    async def load_next(self, engine: "PaginationEngine", generation: int, search: Optional[str]) -> None:
        raise NotImplementedError

    def reset(self, engine: "PaginationEngine") -> None:
        engine._current_page = engine.initial_page

    def set_options(self, engine: "PaginationEngine", options: List[Option]) -> None:
        raise TypeError(f"{self.name} pagination does not hold an option list")


class ClientPagination(PaginationMode):
    """Reveal a statically supplied option list page by page"""
    name = "client"

    def __init__(self, options: List[Option], delay: float = 0.0):
        self.options = list(options)
        self.delay = delay

    def items(self, engine):
        return self.options[:engine._current_page * engine.page_size]

    def has_more(self, engine):
        return engine._current_page < math.ceil(len(self.options) / engine.page_size)

    def total_items(self, engine):
        return len(self.options)

    async def load_next(self, engine, generation, search):
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        if generation != engine._generation:
            return
        engine._current_page += 1

    def set_options(self, engine, options):
        self.options = list(options)
        self.reset(engine)


class ServerPagination(PaginationMode):
    """Request pages from a PageFetcher and append them"""
    name = "server"

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    def items(self, engine):
        return list(engine._items)

    def has_more(self, engine):
        return engine._has_more

    def total_items(self, engine):
        return engine._total_items

    async def load_next(self, engine, generation, search):
        page_number = engine._current_page
        page = await self.fetcher.fetch(page_number, engine.page_size, search)
        if generation != engine._generation:
            logger.debug(f"Discarding page {page_number}, engine was reset while it loaded")
            return
        engine._items.extend(page.items)
        engine._current_page += 1
        engine._has_more = page.has_next_page
        engine._total_items = page.total_items

    def reset(self, engine):
        super().reset(engine)
        engine._items = []
        engine._has_more = True
        engine._total_items = 0


class PaginationEngine:
    """Accumulating page cursor with at most one load in flight"""

    def __init__(self, mode: PaginationMode, page_size: int = None, initial_page: int = 1):
        if page_size is not None and page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.mode = mode
        self.page_size = page_size or get_settings().DEFAULT_PAGE_SIZE
        self.initial_page = initial_page

        self._current_page = initial_page
        self._is_loading = False
        # Bumped on reset, responses of an older generation are dropped
        self._generation = 0

        # Server mode state
        self._items: List[Option] = []
        self._has_more = True
        self._total_items = 0

    @classmethod
    def client(
        cls,
        options: List[Option],
        page_size: int = None,
        initial_page: int = 1,
        delay: float = None,
    ) -> "PaginationEngine":
        if delay is None:
            delay = get_settings().CLIENT_LOAD_DELAY
        return cls(ClientPagination(options, delay=delay), page_size=page_size, initial_page=initial_page)

    @classmethod
    def server(cls, fetcher: PageFetcher, page_size: int = None, initial_page: int = 1) -> "PaginationEngine":
        return cls(ServerPagination(fetcher), page_size=page_size, initial_page=initial_page)

    @property
    def items(self) -> List[Option]:
        return self.mode.items(self)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def has_more(self) -> bool:
        return self.mode.has_more(self)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def total_items(self) -> int:
        return self.mode.total_items(self)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size)

    @property
    def state(self) -> PaginationState:
        return PaginationState(
            items=self.items,
            current_page=self._current_page,
            page_size=self.page_size,
            has_more=self.has_more,
            is_loading=self._is_loading,
            total_items=self.total_items,
        )

    async def load_more(self, search: Optional[str] = None) -> None:
        """
        Load the next page

        Does nothing while a load is in flight or once the source is
        exhausted. A failing fetch is logged and leaves the items untouched.
        """
        if self._is_loading or not self.has_more:
            return

        self._is_loading = True
        generation = self._generation
        try:
            await self.mode.load_next(self, generation, search)
        except Exception as e:
            logger.error(f"Failed to load options page {self._current_page}: {e}")
        finally:
            # After a reset the flag belongs to whoever loads next
            if generation == self._generation:
                self._is_loading = False

    def reset(self) -> None:
        """Back to the initial page, server mode also forgets loaded items"""
        self._generation += 1
        self._is_loading = False
        self.mode.reset(self)

    def set_options(self, options: List[Option]) -> None:
        """Replace the client-held option list and rewind the cursor"""
        self.mode.set_options(self, options)
        self._generation += 1
        self._is_loading = False
