# Catalogue Admin Pydantic Models
from .option import Option, Page, PaginationState, SearchState, CacheEntry
from .part import (
    PartType, PartDomain, PartRecordPage, PART_DOMAINS, get_part_domain, part_type_choices
)

__all__ = [
    # Options and paging
    "Option",
    "Page",
    "PaginationState",
    "SearchState",
    "CacheEntry",
    # Part types
    "PartType",
    "PartDomain",
    "PartRecordPage",
    "PART_DOMAINS",
    "get_part_domain",
    "part_type_choices",
]
