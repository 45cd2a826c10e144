# -*- coding: utf-8 -*-
"""
Option and Paging Pydantic Models
"""
import math
from typing import Any, List, Union

from pydantic import BaseModel, Field


class Option(BaseModel):
    """One selectable entry of a dropdown or table filter"""
    value: Union[str, int] = Field(..., description="Unique value within a displayed list")
    label: str = Field(..., description="Display text, may repeat")

    class Config:
        frozen = True


class Page(BaseModel):
    """Result of one page fetch"""
    items: List[Option] = Field(default_factory=list, description="Ordered slice for one page")
    has_next_page: bool = Field(False, description="More pages are available")
    total_items: int = Field(0, description="Total number of items across all pages")

    @classmethod
    def empty(cls) -> "Page":
        return cls(items=[], has_next_page=False, total_items=0)


class PaginationState(BaseModel):
    """Snapshot of a pagination engine"""
    items: List[Option] = Field(default_factory=list, description="Accumulated items, first loaded first")
    current_page: int = Field(1, description="Next page to request (1-based)")
    page_size: int = Field(50, description="Items per page")
    has_more: bool = Field(True, description="Another load_more may add items")
    is_loading: bool = Field(False, description="A page request is in flight")
    total_items: int = Field(0, description="Total items reported by the source")

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)


class SearchState(BaseModel):
    """Query plus the page-1 state it produced"""
    query: str = Field("", description="Current search text")
    pagination: PaginationState = Field(default_factory=PaginationState)


class CacheEntry(BaseModel):
    """Entry of the keyed lazy-loading option cache"""
    key: str
    options: List[Any] = Field(default_factory=list, description="Loaded options or raw records")
    loading: bool = False
    loaded_at: int = Field(0, description="Logical version at which the entry was filled")
