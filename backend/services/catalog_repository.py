import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

from models.records import BrandRecord, ComparisonRecord, DeviceRecord

logger = logging.getLogger(__name__)

FEATURED_DEVICE_LIMIT = 6
_IMMUTABLE_DEVICE_FIELDS = ("id", "created_at", "updated_at")


class DeviceNotFoundError(LookupError):
    def __init__(self, device_id: int):
        super().__init__(f"Device with ID {device_id} not found")
        self.device_id = device_id


@dataclass
class DeviceFilters:
    brand: str | None = None
    price_min: int | None = None
    price_max: int | None = None
    min_ram: int | None = None
    five_g: bool | None = None
    search: str | None = None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _newest_first(devices: Iterable[DeviceRecord]) -> list[DeviceRecord]:
    # sorted() is stable with reverse=True, so equal release dates keep insertion order
    return sorted(devices, key=lambda d: d.release_date, reverse=True)


def _matches_search(device: DeviceRecord, needle: str) -> bool:
    return (
        needle in device.name.lower()
        or needle in device.brand.lower()
        or needle in device.processor.lower()
    )


def _matches_filters(device: DeviceRecord, filters: DeviceFilters) -> bool:
    if filters.brand and device.brand.lower() != filters.brand.lower():
        return False
    if filters.price_min is not None and device.price < filters.price_min:
        return False
    if filters.price_max is not None and device.price > filters.price_max:
        return False
    if filters.min_ram is not None and device.ram < filters.min_ram:
        return False
    if filters.five_g is not None and device.five_g != filters.five_g:
        return False
    if filters.search and not _matches_search(device, filters.search.lower()):
        return False
    return True


class CatalogRepository:
    """
    In-memory store for devices, brands and saved comparisons.

    Ids come from per-collection counters that start at 1 and are never
    reused. Lookups report a missing id as None (or False for deletes);
    callers decide how to surface that.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._devices: dict[int, DeviceRecord] = {}
        self._brands: dict[int, BrandRecord] = {}
        self._comparisons: dict[int, ComparisonRecord] = {}
        self._next_device_id = 1
        self._next_brand_id = 1
        self._next_comparison_id = 1

    def _device_snapshot(self) -> list[DeviceRecord]:
        with self._lock:
            return list(self._devices.values())

    # --------------------------------------------------
    # DEVICES
    # --------------------------------------------------

    def list_devices(self, filters: DeviceFilters | None = None) -> list[DeviceRecord]:
        devices = self._device_snapshot()
        if filters is not None:
            devices = [d for d in devices if _matches_filters(d, filters)]
        return _newest_first(devices)

    def get_device(self, device_id: int) -> DeviceRecord | None:
        with self._lock:
            return self._devices.get(device_id)

    def create_device(self, data: Mapping[str, Any]) -> DeviceRecord:
        values = {k: v for k, v in data.items() if k not in _IMMUTABLE_DEVICE_FIELDS}
        now = _now()
        with self._lock:
            device = DeviceRecord(
                id=self._next_device_id,
                created_at=now,
                updated_at=now,
                **values,
            )
            self._devices[device.id] = device
            self._next_device_id += 1

        logger.info("Created device id=%s name=%s", device.id, device.name)
        return device

    def update_device(self, device_id: int, changes: Mapping[str, Any]) -> DeviceRecord | None:
        patch = {k: v for k, v in changes.items() if k not in _IMMUTABLE_DEVICE_FIELDS}
        with self._lock:
            current = self._devices.get(device_id)
            if current is None:
                return None
            updated = replace(
                current,
                **patch,
                updated_at=max(_now(), current.updated_at),
            )
            self._devices[device_id] = updated

        logger.info("Updated device id=%s fields=%s", device_id, sorted(patch))
        return updated

    def delete_device(self, device_id: int) -> bool:
        with self._lock:
            removed = self._devices.pop(device_id, None)
        if removed is None:
            return False
        logger.info("Deleted device id=%s", device_id)
        return True

    def get_featured_devices(self) -> list[DeviceRecord]:
        return _newest_first(self._device_snapshot())[:FEATURED_DEVICE_LIMIT]

    def get_devices_by_brand(self, brand_name: str) -> list[DeviceRecord]:
        wanted = brand_name.lower()
        return _newest_first(d for d in self._device_snapshot() if d.brand.lower() == wanted)

    def search_devices(self, query: str) -> list[DeviceRecord]:
        needle = query.lower()
        return _newest_first(d for d in self._device_snapshot() if _matches_search(d, needle))

    def resolve_devices(self, device_ids: Iterable[int]) -> list[DeviceRecord]:
        """
        Look up every id in order. Fails on the first id with no device,
        so callers never see a partial list.
        """
        with self._lock:
            resolved = []
            for device_id in device_ids:
                device = self._devices.get(device_id)
                if device is None:
                    raise DeviceNotFoundError(device_id)
                resolved.append(device)
        return resolved

    # --------------------------------------------------
    # BRANDS
    # --------------------------------------------------

    def list_brands(self) -> list[BrandRecord]:
        with self._lock:
            counts: dict[str, int] = {}
            for device in self._devices.values():
                key = device.brand.lower()
                counts[key] = counts.get(key, 0) + 1

            for brand_id, brand in list(self._brands.items()):
                self._brands[brand_id] = replace(
                    brand, device_count=counts.get(brand.name.lower(), 0)
                )
            brands = list(self._brands.values())

        # case-folded name approximates locale-aware ordering
        return sorted(brands, key=lambda b: (b.name.casefold(), b.name))

    def get_brand(self, brand_id: int) -> BrandRecord | None:
        with self._lock:
            return self._brands.get(brand_id)

    def find_brand_by_name(self, name: str) -> BrandRecord | None:
        wanted = name.lower()
        with self._lock:
            return next((b for b in self._brands.values() if b.name.lower() == wanted), None)

    def create_brand(self, data: Mapping[str, Any]) -> BrandRecord:
        values = {k: v for k, v in data.items() if k not in ("id", "device_count")}
        with self._lock:
            brand = BrandRecord(id=self._next_brand_id, device_count=0, **values)
            self._brands[brand.id] = brand
            self._next_brand_id += 1

        logger.info("Created brand id=%s name=%s", brand.id, brand.name)
        return brand

    # --------------------------------------------------
    # COMPARISONS
    # --------------------------------------------------

    def list_comparisons(self) -> list[ComparisonRecord]:
        with self._lock:
            comparisons = list(self._comparisons.values())
        return sorted(comparisons, key=lambda c: (c.created_at, c.id), reverse=True)

    def get_comparison(self, comparison_id: int) -> ComparisonRecord | None:
        with self._lock:
            return self._comparisons.get(comparison_id)

    def create_comparison(self, data: Mapping[str, Any]) -> ComparisonRecord:
        with self._lock:
            comparison = ComparisonRecord(
                id=self._next_comparison_id,
                name=data["name"],
                device_ids=data["device_ids"],
                created_at=_now(),
            )
            self._comparisons[comparison.id] = comparison
            self._next_comparison_id += 1

        logger.info("Created comparison id=%s name=%s", comparison.id, comparison.name)
        return comparison

    def delete_comparison(self, comparison_id: int) -> bool:
        with self._lock:
            removed = self._comparisons.pop(comparison_id, None)
        if removed is None:
            return False
        logger.info("Deleted comparison id=%s", comparison_id)
        return True
