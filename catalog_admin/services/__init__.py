# Catalogue Admin Services
from .catalog_api import CatalogApiClient, CatalogApiError, get_catalog_client
from .fetchers import PageFetcher, PartOptionFetcher, PartRecordFetcher, StaticOptionFetcher
from .option_cache import OptionCache, UnknownCacheKeyError
from .pagination import PaginationEngine, ClientPagination, ServerPagination
from .searchable import SearchableLoader
from .subtypes import SubTypeResolver, SubTypeOptionFetcher, get_subtype_resolver

__all__ = [
    "CatalogApiClient",
    "CatalogApiError",
    "get_catalog_client",
    "PageFetcher",
    "PartOptionFetcher",
    "PartRecordFetcher",
    "StaticOptionFetcher",
    "OptionCache",
    "UnknownCacheKeyError",
    "PaginationEngine",
    "ClientPagination",
    "ServerPagination",
    "SearchableLoader",
    "SubTypeResolver",
    "SubTypeOptionFetcher",
    "get_subtype_resolver",
]
