"""Fakes and record builders shared by the test modules."""
import asyncio
import json
from typing import Dict, List, Optional

import httpx

from catalog_admin.models import Option, Page
from catalog_admin.services.catalog_api import CatalogApiError


def make_options(count: int, prefix: str = "Option") -> List[Option]:
    return [Option(value=i, label=f"{prefix} {i}") for i in range(1, count + 1)]


class FakePageFetcher:
    """Serves pages out of an in-memory option list and records every call."""

    def __init__(self, options: List[Option], fail_pages=()):
        self.options = list(options)
        self.fail_pages = set(fail_pages)
        self.calls = []

    async def fetch(self, page: int, page_size: int, search: Optional[str] = None) -> Page:
        self.calls.append((page, page_size, search))
        await asyncio.sleep(0)
        if page in self.fail_pages:
            raise CatalogApiError(f"page {page} failed", 503)
        matches = [o for o in self.options if not search or search.lower() in o.label.lower()]
        start = (page - 1) * page_size
        end = start + page_size
        return Page(items=matches[start:end], has_next_page=end < len(matches), total_items=len(matches))


class ControlledFetcher:
    """Every fetch waits until the test resolves it explicitly."""

    def __init__(self):
        self.pending = []

    async def fetch(self, page: int, page_size: int, search: Optional[str] = None) -> Page:
        future = asyncio.get_running_loop().create_future()
        self.pending.append(((page, page_size, search), future))
        return await future

    def resolve(self, index: int, page: Page) -> None:
        self.pending[index][1].set_result(page)

    def fail(self, index: int, error: Exception) -> None:
        self.pending[index][1].set_exception(error)


async def settle(rounds: int = 5) -> None:
    """Let scheduled tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


def engine_record(engine_id: str, name_en: str, name_cn: str, sub_types=None) -> dict:
    return {
        "engines_id": engine_id,
        "engines_name_en": name_en,
        "engines_name_cn": name_cn,
        "type_engines": sub_types or [],
    }


def engine_sub_type(type_id: str, name_en: str, name_cn: str = "") -> dict:
    return {
        "type_engine_id": type_id,
        "type_engine_name_en": name_en,
        "type_engine_name_cn": name_cn,
        "type_engine_description": "",
    }


class FakeCatalogBackend:
    """In-memory catalogue back end behind httpx.MockTransport."""

    def __init__(self, records: Dict[str, List[dict]] = None):
        self.records = records or {}
        self.requests = []
        self.fail_status: Optional[int] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content or b"{}")
        self.requests.append((request.url.path, payload, request))
        if self.fail_status:
            return httpx.Response(self.fail_status, json={"success": False, "message": "error"})

        # /api/catalogs/<endpoint>/get
        endpoint = request.url.path.rstrip("/").split("/")[-2]
        items = self.records.get(endpoint)
        if items is None:
            return httpx.Response(200, json={"success": False, "message": f"unknown catalog {endpoint}"})

        search = (payload.get("search") or "").lower()
        if search:
            items = [r for r in items if any(search in str(v).lower() for v in r.values() if isinstance(v, str))]

        page, limit = payload["page"], payload["limit"]
        total_pages = -(-len(items) // limit) if items else 0
        start = (page - 1) * limit
        return httpx.Response(200, json={
            "success": True,
            "message": "ok",
            "data": {
                "items": items[start:start + limit],
                "pagination": {"page": page, "limit": limit, "total": len(items), "totalPages": total_pages},
            },
        })

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)
