# -*- coding: utf-8 -*-
"""
Catalogue Back End API Client
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from catalog_admin.config import Settings, get_settings
from catalog_admin.models import PartDomain

logger = logging.getLogger(__name__)


class CatalogApiError(Exception):
    """Catalogue API Error"""
    def __init__(self, message: str, status_code: int = None, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class CatalogApiClient:
    """Client for the part catalogue REST API"""

    def __init__(self, settings: Settings = None, transport: httpx.AsyncBaseTransport = None):
        self.settings = settings or get_settings()
        # Tests inject httpx.MockTransport here
        self._transport = transport

    def _get_headers(self) -> dict:
        """Get request headers"""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json; charset=utf-8",
        }
        if self.settings.API_TOKEN:
            headers["Authorization"] = f"Bearer {self.settings.API_TOKEN}"
        return headers

    async def _request(
        self,
        method: str,
        endpoint: str,
        data: dict = None,
        timeout: float = None,
        retries: int = None,
    ) -> dict:
        """Make HTTP request to the catalogue API with retry logic"""
        url = f"{self.settings.API_BASE_URL.rstrip('/')}/{endpoint.lstrip('/')}"
        timeout = timeout or self.settings.API_TIMEOUT
        # At least one attempt, whatever the configured retry count
        retries = max(1, self.settings.API_RETRIES if retries is None else retries)
        if method not in ("GET", "POST"):
            raise ValueError(f"Unsupported method: {method}")

        last_error = None
        for attempt in range(retries):
            try:
                async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                    if method == "GET":
                        response = await client.get(url, headers=self._get_headers(), params=data)
                    else:
                        content = json.dumps(data or {}, ensure_ascii=False).encode("utf-8")
                        response = await client.post(url, headers=self._get_headers(), content=content)

                    response.raise_for_status()
                    result = response.json()

                    if isinstance(result, dict) and result.get("success") is False:
                        raise CatalogApiError(
                            result.get("message") or "Request was not successful",
                            response.status_code,
                            result,
                        )

                    return result

            except httpx.TimeoutException:
                last_error = CatalogApiError(
                    f"Request timeout (attempt {attempt + 1}/{retries})", details={"url": url}
                )
                logger.warning(f"Catalogue API timeout: {url} (attempt {attempt + 1})")
            except httpx.HTTPStatusError as e:
                last_error = CatalogApiError(f"HTTP error: {e.response.status_code}", e.response.status_code)
                logger.error(f"Catalogue API HTTP error: {e.response.status_code} for {url}")
                break  # Don't retry on HTTP errors
            except CatalogApiError:
                raise
            except (httpx.HTTPError, ValueError) as e:
                last_error = CatalogApiError(str(e), details={"url": url})
                logger.error(f"Catalogue API error: {e}")

        raise last_error

    async def post(self, endpoint: str, data: dict) -> dict:
        """POST request"""
        return await self._request("POST", endpoint, data)

    async def get(self, endpoint: str, params: dict = None) -> dict:
        """GET request"""
        return await self._request("GET", endpoint, params)

    # ==================== Part Catalogue ====================

    async def list_parts(
        self,
        domain: PartDomain,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Fetch one page of parent records of a part type

        Args:
            domain: Part type row from the domain table
            page: 1-based page number
            limit: Page size
            search: Optional search text
            sort_order: "asc", "desc" or "" for server default

        Returns:
            Dict with "items" (raw records) and "pagination"
            ({page, limit, total, totalPages})
        """
        payload = {
            "page": page,
            "limit": limit,
            "search": search or "",
            "sort_order": self.settings.SORT_ORDER if sort_order is None else sort_order,
        }
        result = await self.post(f"catalogs/{domain.endpoint}/get", payload)
        data = result.get("data") or {}
        if not isinstance(data, dict):
            raise CatalogApiError("Malformed catalogue response", details={"data": data})
        return {
            "items": data.get("items") or [],
            "pagination": data.get("pagination") or {},
        }


# Singleton instance
_catalog_client: Optional[CatalogApiClient] = None


def get_catalog_client() -> CatalogApiClient:
    """Get catalogue API client singleton"""
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogApiClient()
    return _catalog_client
