# -*- coding: utf-8 -*-
"""
Sub-type (leaf option) resolution

Sub-types are not served by their own endpoint, they are nested inside the
parent record. The resolver finds the parent in the first page of its part
type and pages through the nested collection locally.
"""
import logging
from typing import Any, Optional

from catalog_admin.config import get_settings
from catalog_admin.models import Page, PART_DOMAINS, get_part_domain
from catalog_admin.services.catalog_api import CatalogApiClient, get_catalog_client
from catalog_admin.services.fetchers import PartRecordFetcher
from catalog_admin.services.option_cache import OptionCache
from catalog_admin.services.transforms import find_parent, leaf_matches, leaf_records, to_subtype_options

logger = logging.getLogger(__name__)


class SubTypeResolver:
    """Resolve the sub-type options of one parent record"""

    def __init__(self, client: CatalogApiClient = None, cache: OptionCache = None, parent_page_size: int = None):
        self.client = client or get_catalog_client()
        if cache is None:
            cache = OptionCache(batch_size=parent_page_size or get_settings().SUBTYPE_PARENT_PAGE_SIZE)
        self.cache = cache
        # Binding does not fetch, a part type loads on its first resolve
        for tag, domain in PART_DOMAINS.items():
            if not self.cache.is_bound(tag.value):
                self.cache.bind(tag.value, PartRecordFetcher(domain, self.client))

    async def resolve(
        self,
        domain_tag: str,
        parent_id: Any,
        search_term: Optional[str] = "",
        page: int = 1,
        page_size: int = 20,
    ) -> Page:
        """
        One page of sub-type options of a parent record

        Args:
            domain_tag: Part type, e.g. "engine"
            parent_id: Identifier of the parent record
            search_term: Case-insensitive filter over both name languages
            page: 1-based page number
            page_size: Items per page

        Returns:
            Page of options; an empty page when the part type is unknown,
            the parent is missing or the parents could not be loaded
        """
        domain = get_part_domain(domain_tag)
        if domain is None:
            logger.warning(f"Unknown part type for sub-types: {domain_tag}")
            return Page.empty()

        try:
            parents = await self.cache.ensure_loaded(domain.tag.value)
        except Exception as e:
            logger.error(f"Error loading {domain.tag.value} records for sub-types: {e}")
            return Page.empty()

        parent = find_parent(domain, parents, parent_id)
        if parent is None:
            logger.info(f"{domain.display_name} {parent_id} not found in cached records")
            return Page.empty()

        leaves = leaf_records(domain, parent)
        if search_term:
            leaves = [leaf for leaf in leaves if leaf_matches(domain, leaf, search_term)]

        page = max(page, 1)
        page_size = max(page_size, 1)
        start = (page - 1) * page_size
        end = start + page_size

        return Page(
            items=to_subtype_options(domain, leaves[start:end]),
            has_next_page=end < len(leaves),
            total_items=len(leaves),
        )

    def invalidate(self, domain_tag: str) -> None:
        """Forget cached parent records, e.g. after a parent was edited"""
        domain = get_part_domain(domain_tag)
        if domain is not None:
            self.cache.invalidate(domain.tag.value)


class SubTypeOptionFetcher:
    """PageFetcher over the sub-types of one parent, for SearchableLoader"""

    def __init__(self, resolver: SubTypeResolver, domain_tag: str, parent_id: Any):
        self.resolver = resolver
        self.domain_tag = domain_tag
        self.parent_id = parent_id

    async def fetch(self, page: int, page_size: int, search: Optional[str] = None) -> Page:
        return await self.resolver.resolve(self.domain_tag, self.parent_id, search or "", page, page_size)


# Singleton instance
_subtype_resolver: Optional[SubTypeResolver] = None


def get_subtype_resolver() -> SubTypeResolver:
    """Get sub-type resolver singleton"""
    global _subtype_resolver
    if _subtype_resolver is None:
        _subtype_resolver = SubTypeResolver()
    return _subtype_resolver
