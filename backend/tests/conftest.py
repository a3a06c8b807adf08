"""
Shared fixtures: repositories, device payloads and an HTTP client bound to
a freshly seeded store.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from pydantic.alias_generators import to_camel

from db.seed import seed_sample_data
from main import create_app
from services.catalog_repository import CatalogRepository

# Seed ids in creation order
GALAXY_S24_ULTRA = 1
IPHONE_15_PRO = 2
PIXEL_8_PRO = 3
ONEPLUS_12 = 4
GALAXY_A54 = 5
SEED_IDS_NEWEST_FIRST = [GALAXY_S24_ULTRA, ONEPLUS_12, PIXEL_8_PRO, IPHONE_15_PRO, GALAXY_A54]


def make_device_data(**overrides) -> dict:
    data = {
        "name": "Test Phone",
        "brand": "Acme",
        "model": "AC-1",
        "price": 59900,
        "release_date": datetime(2024, 6, 1, tzinfo=timezone.utc),
        "display_size": 6.5,
        "display_type": "AMOLED",
        "display_resolution": "2400 x 1080",
        "refresh_rate": 120,
        "processor": "Acme Chip 1",
        "processor_brand": "Acme",
        "ram": 8,
        "storage": 256,
        "main_camera": "64MP f/1.8",
        "front_camera": "16MP f/2.4",
        "video_recording": "4K@30fps",
        "battery_capacity": 4500,
        "dimensions": "160 x 75 x 8 mm",
        "weight": 190,
        "build_material": "Aluminum frame",
        "wifi": "Wi-Fi 6",
        "bluetooth": "5.2",
        "operating_system": "Android",
        "os_version": "14",
    }
    data.update(overrides)
    return data


def to_payload(data: dict) -> dict:
    """camelCase JSON body for the HTTP API."""
    payload = {}
    for key, value in data.items():
        if isinstance(value, datetime):
            value = value.isoformat()
        payload[to_camel(key)] = value
    return payload


@pytest.fixture
def device_data():
    return make_device_data


@pytest.fixture
def repo() -> CatalogRepository:
    return CatalogRepository()


@pytest.fixture
def seeded_repo() -> CatalogRepository:
    store = CatalogRepository()
    seed_sample_data(store)
    return store


@pytest.fixture
def client(seeded_repo) -> TestClient:
    return TestClient(create_app(store=seeded_repo))
