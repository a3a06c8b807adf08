# routers/devices.py

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from db.deps import get_store
from models.records import DeviceRecord
from models.schemas import (
    DeviceCreate,
    DeviceMetricsResponse,
    DeviceResponse,
    DeviceUpdate,
)
from services import metrics
from services.catalog_repository import CatalogRepository, DeviceFilters

router = APIRouter(prefix="/api", tags=["devices"])


def _require_device(store: CatalogRepository, device_id: int) -> DeviceRecord:
    device = store.get_device(device_id)
    if device is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return device


@router.get("/devices", response_model=list[DeviceResponse])
def list_devices(
    brand: str | None = Query(None),
    price_min: int | None = Query(None, alias="priceMin"),
    price_max: int | None = Query(None, alias="priceMax"),
    min_ram: int | None = Query(None, alias="minRam"),
    five_g: bool | None = Query(None, alias="fiveG"),
    search: str | None = Query(None),
    features: list[str] | None = Query(None),
    store: CatalogRepository = Depends(get_store),
):
    devices = store.list_devices(
        DeviceFilters(
            brand=brand,
            price_min=price_min,
            price_max=price_max,
            min_ram=min_ram,
            five_g=five_g,
            search=search,
        )
    )
    if features:
        devices = [d for d in devices if metrics.matches_features(d, features)]
    return devices


@router.get("/devices/featured", response_model=list[DeviceResponse])
def featured_devices(store: CatalogRepository = Depends(get_store)):
    return store.get_featured_devices()


@router.get("/devices/brand/{brand_name}", response_model=list[DeviceResponse])
def devices_by_brand(brand_name: str, store: CatalogRepository = Depends(get_store)):
    return store.get_devices_by_brand(brand_name)


@router.get("/devices/{device_id}", response_model=DeviceResponse)
def get_device(device_id: int, store: CatalogRepository = Depends(get_store)):
    return _require_device(store, device_id)


@router.get("/devices/{device_id}/metrics", response_model=DeviceMetricsResponse)
def device_metrics(device_id: int, store: CatalogRepository = Depends(get_store)):
    device = _require_device(store, device_id)
    return {
        "device_id": device.id,
        "performance_score": metrics.performance_score(device),
        "value_score": metrics.value_score(device),
        "price_score": metrics.price_score(device),
        "antutu_per_dollar": metrics.antutu_per_dollar(device),
        "ram_per_dollar": metrics.ram_per_dollar(device),
        "battery_per_dollar": metrics.battery_per_dollar(device),
        "dollars_per_gb_ram": metrics.dollars_per_gb_ram(device),
        "camera_megapixels": metrics.extract_megapixels(device.main_camera),
        "price_tier": metrics.price_tier(device),
        "performance_tier": metrics.performance_tier(device),
        "battery_life_hours": metrics.battery_life_hours(device.battery_capacity),
    }


@router.post("/devices", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
def create_device(payload: DeviceCreate, store: CatalogRepository = Depends(get_store)):
    return store.create_device(payload.model_dump())


@router.put("/devices/{device_id}", response_model=DeviceResponse)
def update_device(
    device_id: int,
    payload: DeviceUpdate,
    store: CatalogRepository = Depends(get_store),
):
    device = store.update_device(device_id, payload.changes())
    if device is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return device


@router.delete("/devices/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_device(device_id: int, store: CatalogRepository = Depends(get_store)):
    if not store.delete_device(device_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/search", response_model=list[DeviceResponse])
def search_devices(
    q: str | None = Query(None),
    store: CatalogRepository = Depends(get_store),
):
    if not q:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search query is required")
    return store.search_devices(q)
