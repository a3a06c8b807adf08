# models/records.py

import json
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class DeviceRecord:
    id: int
    name: str
    brand: str                  # denormalized BrandRecord.name
    model: str
    price: int                  # cents
    release_date: datetime
    image: str | None = None

    # Display
    display_size: float         # inches
    display_type: str
    display_resolution: str
    refresh_rate: int           # Hz
    brightness: int | None = None

    # Performance
    processor: str
    processor_brand: str
    ram: int                    # GB
    storage: int                # GB
    expandable_storage: bool = False

    # Camera
    main_camera: str
    ultra_wide_camera: str | None = None
    telephoto_camera: str | None = None
    front_camera: str
    video_recording: str

    # Battery
    battery_capacity: int       # mAh
    charging_speed: int | None = None
    wireless_charging: bool = False

    # Design
    dimensions: str
    weight: int                 # grams
    build_material: str
    water_resistance: str | None = None

    # Connectivity
    five_g: bool = False
    wifi: str
    bluetooth: str
    nfc: bool = False

    # Software
    operating_system: str
    os_version: str

    # Benchmarks (None = not benchmarked)
    antutu_score: int | None = None
    geekbench_single: int | None = None
    geekbench_multi: int | None = None

    fingerprint: bool = False
    face_unlock: bool = False
    headphone_jack: bool = False

    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, kw_only=True)
class BrandRecord:
    id: int
    name: str
    logo: str | None = None
    description: str | None = None
    website: str | None = None
    device_count: int = 0


@dataclass(frozen=True, kw_only=True)
class ComparisonRecord:
    id: int
    name: str
    device_ids: str             # JSON-encoded list of device ids
    created_at: datetime


def encode_device_ids(device_ids: list[int]) -> str:
    return json.dumps([int(i) for i in device_ids])


def decode_device_ids(raw: str) -> list[int]:
    try:
        value = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise ValueError(f"deviceIds is not valid JSON: {raw!r}") from exc

    if not isinstance(value, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) for item in value
    ):
        raise ValueError("deviceIds must be a JSON list of integers")
    return value
