"""Pytest configuration and shared fixtures."""
from typing import List

import pytest

from catalog_admin.config import Settings
from catalog_admin.services.catalog_api import CatalogApiClient
from tests.helpers import FakeCatalogBackend, engine_record, engine_sub_type


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        API_BASE_URL="http://catalog.test/api",
        API_TOKEN="secret-token",
        API_RETRIES=2,
        SUBTYPE_PARENT_PAGE_SIZE=10,
        CLIENT_LOAD_DELAY=0.0,
    )


@pytest.fixture
def engine_records() -> List[dict]:
    turbo_parent = engine_record(
        "eng-1", "Diesel D12", "柴油 D12",
        [
            engine_sub_type("t-1", "Turbo Intercooled", "涡轮中冷"),
            engine_sub_type("t-2", "Naturally Aspirated", "自然吸气"),
            engine_sub_type("t-3", "Twin TURBO", "双涡轮"),
            engine_sub_type("t-4", "Common Rail", "共轨"),
            engine_sub_type("t-5", "Euro 5", "国五"),
            engine_sub_type("t-6", "Euro 6", "国六"),
            engine_sub_type("t-7", "Compressed Natural Gas", "天然气"),
        ],
    )
    return [
        turbo_parent,
        engine_record("eng-2", "Petrol P4", "汽油 P4", [engine_sub_type("p-1", "Injection", "喷射")]),
        engine_record("eng-3", "Hybrid H1", "", []),
    ]


@pytest.fixture
def catalog_backend(engine_records) -> FakeCatalogBackend:
    return FakeCatalogBackend({"engines": engine_records})


@pytest.fixture
def catalog_client(test_settings, catalog_backend) -> CatalogApiClient:
    return CatalogApiClient(settings=test_settings, transport=catalog_backend.transport())
