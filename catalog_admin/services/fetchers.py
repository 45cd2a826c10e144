# -*- coding: utf-8 -*-
"""
Page fetchers

A page fetcher returns one page of a data domain for a page index, a page
size and optional search text. Pagination engines, searchable loaders and
the option cache talk to the catalogue only through this interface.
"""
import logging
from typing import List, Optional, Protocol, runtime_checkable

from catalog_admin.models import Option, Page, PartDomain, PartRecordPage
from catalog_admin.services.catalog_api import CatalogApiClient
from catalog_admin.services.select_helpers import filter_options
from catalog_admin.services.transforms import to_part_options

logger = logging.getLogger(__name__)


@runtime_checkable
class PageFetcher(Protocol):
    """Anything that can fetch one page of a domain"""

    async def fetch(self, page: int, page_size: int, search: Optional[str] = None) -> Page:
        ...


def _has_next_page(pagination: dict, requested_page: int) -> bool:
    current = pagination.get("page") or requested_page
    return current < (pagination.get("totalPages") or 0)


class PartRecordFetcher:
    """Raw parent records of one part type"""

    def __init__(self, domain: PartDomain, client: CatalogApiClient, sort_order: str = ""):
        self.domain = domain
        self.client = client
        self.sort_order = sort_order

    async def fetch(self, page: int, page_size: int, search: Optional[str] = None) -> PartRecordPage:
        data = await self.client.list_parts(
            self.domain, page=page, limit=page_size, search=search, sort_order=self.sort_order
        )
        pagination = data["pagination"]
        return PartRecordPage(
            items=data["items"],
            has_next_page=_has_next_page(pagination, page),
            total_items=pagination.get("total") or 0,
        )


class PartOptionFetcher:
    """Parent options of one part type, paged by the server"""

    def __init__(self, domain: PartDomain, client: CatalogApiClient, sort_order: Optional[str] = None):
        self.domain = domain
        self._records = PartRecordFetcher(domain, client, sort_order=sort_order)

    async def fetch(self, page: int, page_size: int, search: Optional[str] = None) -> Page:
        records = await self._records.fetch(page, page_size, search)
        logger.debug(f"Fetched {self.domain.tag.value} page {page}: {len(records.items)} records")
        return Page(
            items=to_part_options(self.domain, records.items),
            has_next_page=records.has_next_page,
            total_items=records.total_items,
        )


class StaticOptionFetcher:
    """Serves an option list already held by the client, filtered by search"""

    def __init__(self, options: List[Option]):
        self.options = list(options)

    async def fetch(self, page: int, page_size: int, search: Optional[str] = None) -> Page:
        matches = filter_options(self.options, search)
        start = (max(page, 1) - 1) * page_size
        end = start + page_size
        return Page(items=matches[start:end], has_next_page=end < len(matches), total_items=len(matches))
