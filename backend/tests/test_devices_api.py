import logging

from fastapi.testclient import TestClient

from conftest import (
    GALAXY_A54,
    GALAXY_S24_ULTRA,
    IPHONE_15_PRO,
    ONEPLUS_12,
    PIXEL_8_PRO,
    SEED_IDS_NEWEST_FIRST,
    to_payload,
)
from main import create_app


def _ids(response):
    return [item["id"] for item in response.json()]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unexpected_error_returns_500(seeded_repo, monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise ZeroDivisionError("boom")

    monkeypatch.setattr(seeded_repo, "list_devices", broken)
    client = TestClient(create_app(store=seeded_repo), raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="main"):
        response = client.get("/api/devices")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "Unhandled error on GET /api/devices" in caplog.text
    assert any(record.exc_info for record in caplog.records)


def test_list_devices_uses_camel_case(client):
    response = client.get("/api/devices")

    assert response.status_code == 200
    assert _ids(response) == SEED_IDS_NEWEST_FIRST
    first = response.json()[0]
    assert first["fiveG"] is True
    assert first["releaseDate"].startswith("2024-01-24")
    assert first["antutuScore"] == 1650000
    assert "five_g" not in first


def test_list_devices_with_filters(client):
    response = client.get("/api/devices", params={"priceMin": 30000, "priceMax": 50000})
    assert _ids(response) == [GALAXY_A54]

    response = client.get("/api/devices", params={"brand": "samsung", "minRam": 12})
    assert _ids(response) == [GALAXY_S24_ULTRA]

    response = client.get("/api/devices", params={"fiveG": "false"})
    assert response.json() == []

    response = client.get("/api/devices", params={"search": "snapdragon"})
    assert _ids(response) == [GALAXY_S24_ULTRA, ONEPLUS_12]


def test_list_devices_with_features(client):
    response = client.get(
        "/api/devices",
        params=[("features", "Fast Charging"), ("features", "Expandable Storage")],
    )
    assert _ids(response) == [GALAXY_S24_ULTRA]


def test_malformed_filter_is_rejected(client):
    response = client.get("/api/devices", params={"priceMin": "cheap"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request"


def test_featured_devices(client):
    response = client.get("/api/devices/featured")
    assert _ids(response) == SEED_IDS_NEWEST_FIRST


def test_get_device(client):
    response = client.get(f"/api/devices/{PIXEL_8_PRO}")

    assert response.status_code == 200
    assert response.json()["name"] == "Pixel 8 Pro"


def test_get_device_not_found(client):
    response = client.get("/api/devices/999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Device not found"}


def test_get_device_with_bad_id(client):
    assert client.get("/api/devices/abc").status_code == 400


def test_device_metrics(client):
    response = client.get(f"/api/devices/{GALAXY_S24_ULTRA}/metrics")

    assert response.status_code == 200
    body = response.json()
    assert body["deviceId"] == GALAXY_S24_ULTRA
    assert body["performanceScore"] == 67
    assert body["valueScore"] == 51
    assert body["antutuPerDollar"] == 1270
    assert body["cameraMegapixels"] == 200
    assert body["priceTier"] == "Premium"


def test_create_device(client, device_data):
    response = client.post("/api/devices", json=to_payload(device_data(name="Nord 4")))

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 6
    assert body["name"] == "Nord 4"
    assert body["nfc"] is False
    assert body["brightness"] is None
    assert body["createdAt"] == body["updatedAt"]

    assert client.get("/api/devices/6").json()["name"] == "Nord 4"


def test_create_device_rejects_missing_fields(client, device_data):
    payload = to_payload(device_data())
    del payload["processor"]

    response = client.post("/api/devices", json=payload)
    assert response.status_code == 400


def test_create_device_rejects_bad_values(client, device_data):
    response = client.post("/api/devices", json=to_payload(device_data(ram=0)))
    assert response.status_code == 400


def test_update_device_is_partial(client):
    response = client.put(f"/api/devices/{IPHONE_15_PRO}", json={"price": 89900, "headphoneJack": True})

    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 89900
    assert body["headphoneJack"] is True
    assert body["name"] == "iPhone 15 Pro"
    assert body["updatedAt"] >= body["createdAt"]


def test_update_device_rejects_null_required_field(client):
    response = client.put(f"/api/devices/{IPHONE_15_PRO}", json={"name": None})
    assert response.status_code == 400


def test_update_device_can_clear_optional_field(client):
    response = client.put(f"/api/devices/{IPHONE_15_PRO}", json={"antutuScore": None})

    assert response.status_code == 200
    assert response.json()["antutuScore"] is None


def test_update_unknown_device(client):
    assert client.put("/api/devices/999", json={"price": 1}).status_code == 404


def test_delete_device(client):
    response = client.delete(f"/api/devices/{GALAXY_A54}")
    assert response.status_code == 204

    assert client.get(f"/api/devices/{GALAXY_A54}").status_code == 404
    assert client.delete(f"/api/devices/{GALAXY_A54}").status_code == 404


def test_devices_by_brand(client):
    response = client.get("/api/devices/brand/SAMSUNG")
    assert _ids(response) == [GALAXY_S24_ULTRA, GALAXY_A54]


def test_search(client):
    response = client.get("/api/search", params={"q": "pixel"})
    assert _ids(response) == [PIXEL_8_PRO]


def test_search_requires_query(client):
    assert client.get("/api/search").status_code == 400
    assert client.get("/api/search", params={"q": ""}).status_code == 400
