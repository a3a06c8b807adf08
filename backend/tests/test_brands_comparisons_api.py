from conftest import GALAXY_A54, GALAXY_S24_ULTRA, ONEPLUS_12


# ---------- BRANDS ----------

def test_list_brands(client):
    response = client.get("/api/brands")

    assert response.status_code == 200
    body = response.json()
    assert [b["name"] for b in body] == ["Apple", "Google", "OnePlus", "Samsung", "Xiaomi"]
    samsung = next(b for b in body if b["name"] == "Samsung")
    assert samsung["deviceCount"] == 2


def test_get_brand(client):
    response = client.get("/api/brands/1")

    assert response.status_code == 200
    assert response.json()["name"] == "Samsung"
    assert client.get("/api/brands/99").status_code == 404


def test_create_brand(client):
    response = client.post("/api/brands", json={"name": "Nothing", "website": "https://nothing.tech"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 6
    assert body["deviceCount"] == 0
    assert body["logo"] is None


def test_create_duplicate_brand(client):
    response = client.post("/api/brands", json={"name": "samsung"})
    assert response.status_code == 409


def test_create_brand_requires_name(client):
    assert client.post("/api/brands", json={"website": "https://x.test"}).status_code == 400


# ---------- SAVED COMPARISONS ----------

def test_create_comparison_from_list(client):
    response = client.post("/api/comparisons", json={"name": "Flagships", "deviceIds": [1, 4]})

    assert response.status_code == 201
    body = response.json()
    assert body["deviceIds"] == "[1, 4]"
    assert body["name"] == "Flagships"


def test_create_comparison_from_encoded_string(client):
    response = client.post("/api/comparisons", json={"name": "Budget", "deviceIds": "[5,3]"})

    assert response.status_code == 201
    assert response.json()["deviceIds"] == "[5, 3]"


def test_create_comparison_rejects_bad_ids(client):
    response = client.post("/api/comparisons", json={"name": "Broken", "deviceIds": "five"})
    assert response.status_code == 400


def test_comparison_lifecycle(client):
    first = client.post("/api/comparisons", json={"name": "A", "deviceIds": [1, 2]}).json()
    second = client.post("/api/comparisons", json={"name": "B", "deviceIds": [3, 4]}).json()

    listed = client.get("/api/comparisons").json()
    assert [c["id"] for c in listed] == [second["id"], first["id"]]

    assert client.get(f"/api/comparisons/{first['id']}").json()["name"] == "A"
    assert client.delete(f"/api/comparisons/{first['id']}").status_code == 204
    assert client.get(f"/api/comparisons/{first['id']}").status_code == 404
    assert client.delete(f"/api/comparisons/{first['id']}").status_code == 404


def test_comparison_devices_are_resolved_lazily(client):
    created = client.post(
        "/api/comparisons", json={"name": "Flagships", "deviceIds": [GALAXY_S24_ULTRA, ONEPLUS_12]}
    ).json()

    response = client.get(f"/api/comparisons/{created['id']}/devices")
    assert [d["id"] for d in response.json()] == [GALAXY_S24_ULTRA, ONEPLUS_12]

    client.delete(f"/api/devices/{ONEPLUS_12}")

    assert client.get(f"/api/comparisons/{created['id']}").status_code == 200
    response = client.get(f"/api/comparisons/{created['id']}/devices")
    assert response.status_code == 400
    assert response.json()["detail"] == f"Device with ID {ONEPLUS_12} not found"


# ---------- AD-HOC COMPARE ----------

def test_compare_devices(client):
    response = client.post("/api/compare", json={"deviceIds": [GALAXY_A54, GALAXY_S24_ULTRA]})

    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == [GALAXY_A54, GALAXY_S24_ULTRA]


def test_compare_needs_two_devices(client):
    assert client.post("/api/compare", json={"deviceIds": [1]}).status_code == 400
    assert client.post("/api/compare", json={}).status_code == 400


def test_compare_fails_on_unknown_device(client):
    response = client.post("/api/compare", json={"deviceIds": [1, 99]})

    assert response.status_code == 400
    assert response.json()["detail"] == "Device with ID 99 not found"


def test_compare_summary(client):
    response = client.post("/api/compare/summary", json={"deviceIds": [GALAXY_S24_ULTRA, GALAXY_A54]})

    assert response.status_code == 200
    body = response.json()
    assert [row["id"] for row in body["devices"]] == [GALAXY_S24_ULTRA, GALAXY_A54]
    assert body["winners"]["price"] == GALAXY_A54
    assert body["winners"]["camera"] == GALAXY_S24_ULTRA
