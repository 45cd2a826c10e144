# -*- coding: utf-8 -*-
"""
Option API Router
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from catalog_admin.config import get_settings
from catalog_admin.models import Option, Page, get_part_domain, part_type_choices
from catalog_admin.services import (
    CatalogApiClient,
    CatalogApiError,
    PartOptionFetcher,
    SubTypeResolver,
    get_catalog_client,
    get_subtype_resolver,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/options", tags=["options"])


@router.get("/part-types", response_model=List[Option])
async def list_part_types():
    """Part types for the part type selector"""
    return [Option(value=value, label=label) for value, label in part_type_choices()]


@router.get("/{part_type}", response_model=Page)
async def get_part_options(
    part_type: str,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=200),
    search: Optional[str] = Query(None, description="Search query"),
    client: CatalogApiClient = Depends(get_catalog_client),
):
    """One page of parent options of a part type"""
    domain = get_part_domain(part_type)
    if domain is None:
        logger.warning(f"Options requested for unknown part type: {part_type}")
        return Page.empty()

    fetcher = PartOptionFetcher(domain, client)
    try:
        return await fetcher.fetch(page, page_size or get_settings().SELECT_PAGE_SIZE, search)
    except CatalogApiError as e:
        logger.error(f"Error fetching {part_type} options: {e.message}")
        return Page.empty()
    except Exception as e:
        logger.error(f"Unexpected {part_type} options response: {e}")
        return Page.empty()


@router.get("/{part_type}/{part_id}/sub-types", response_model=Page)
async def get_sub_type_options(
    part_type: str,
    part_id: str,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=200),
    search: Optional[str] = Query(None, description="Search query"),
    resolver: SubTypeResolver = Depends(get_subtype_resolver),
):
    """One page of sub-type options of a parent record"""
    return await resolver.resolve(
        part_type, part_id, search or "", page, page_size or get_settings().SELECT_PAGE_SIZE
    )


@router.post("/{part_type}/invalidate")
async def invalidate_part_type(
    part_type: str,
    resolver: SubTypeResolver = Depends(get_subtype_resolver),
):
    """Drop cached parent records after the part type was edited"""
    resolver.invalidate(part_type)
    return {"invalidated": part_type}
