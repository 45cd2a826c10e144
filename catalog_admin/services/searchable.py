# -*- coding: utf-8 -*-
"""
Search-aware option loader for async select widgets
"""
import logging
from typing import List

from catalog_admin.config import get_settings
from catalog_admin.models import Option, SearchState
from catalog_admin.services.fetchers import PageFetcher
from catalog_admin.services.pagination import PaginationEngine

logger = logging.getLogger(__name__)


class SearchableLoader:
    """
    Server pagination bound to a live search string

    Every query change starts over at page 1. A query change while an older
    request is in flight resets the engine, so the older response is dropped
    when it arrives and the latest query always wins.
    """

    def __init__(self, fetcher: PageFetcher, page_size: int = None, query: str = ""):
        self.fetcher = fetcher
        self._engine = PaginationEngine.server(fetcher, page_size=page_size or get_settings().SELECT_PAGE_SIZE)
        self._query = query

    @property
    def query(self) -> str:
        return self._query

    @property
    def items(self) -> List[Option]:
        return self._engine.items

    @property
    def has_more(self) -> bool:
        return self._engine.has_more

    @property
    def is_loading(self) -> bool:
        return self._engine.is_loading

    @property
    def total_items(self) -> int:
        return self._engine.total_items

    @property
    def current_page(self) -> int:
        return self._engine.current_page

    @property
    def state(self) -> SearchState:
        return SearchState(query=self._query, pagination=self._engine.state)

    def _search_param(self):
        return self._query or None

    async def set_search(self, query: str) -> None:
        """Switch to a new query and load its first page"""
        self._query = query or ""
        logger.debug(f"Search changed to {self._query!r}")
        self._engine.reset()
        await self._engine.load_more(search=self._search_param())

    async def load_more_for_current_query(self) -> None:
        """Next page of the current query, no-op while loading or exhausted"""
        await self._engine.load_more(search=self._search_param())

    async def refresh(self) -> None:
        """Reload page 1 of the current query"""
        await self.set_search(self._query)

    def reset(self) -> None:
        """Clear the query and everything loaded for it"""
        self._query = ""
        self._engine.reset()
