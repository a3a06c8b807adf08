from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.records import decode_device_ids, encode_device_ids


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ==================================================
# DEVICES
# ==================================================

class DeviceCreate(CamelModel):
    name: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    release_date: datetime
    image: str | None = None

    display_size: float = Field(..., gt=0)
    display_type: str
    display_resolution: str
    refresh_rate: int = Field(..., gt=0)
    brightness: int | None = Field(None, gt=0)

    processor: str
    processor_brand: str
    ram: int = Field(..., gt=0)
    storage: int = Field(..., gt=0)
    expandable_storage: bool = False

    main_camera: str
    ultra_wide_camera: str | None = None
    telephoto_camera: str | None = None
    front_camera: str
    video_recording: str

    battery_capacity: int = Field(..., gt=0)
    charging_speed: int | None = Field(None, gt=0)
    wireless_charging: bool = False

    dimensions: str
    weight: int = Field(..., gt=0)
    build_material: str
    water_resistance: str | None = None

    five_g: bool = False
    wifi: str
    bluetooth: str
    nfc: bool = False

    operating_system: str
    os_version: str

    antutu_score: int | None = Field(None, ge=0)
    geekbench_single: int | None = Field(None, ge=0)
    geekbench_multi: int | None = Field(None, ge=0)

    fingerprint: bool = False
    face_unlock: bool = False
    headphone_jack: bool = False

    @field_validator("release_date")
    @classmethod
    def _release_date_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


# Fields that are required on create and may not be cleared by a patch.
_REQUIRED_DEVICE_FIELDS = tuple(
    name for name, info in DeviceCreate.model_fields.items() if info.is_required()
)


class DeviceUpdate(CamelModel):
    """
    Merge-patch body: only keys present in the request are applied.
    """

    name: str | None = Field(None, min_length=1)
    brand: str | None = Field(None, min_length=1)
    model: str | None = Field(None, min_length=1)
    price: int | None = Field(None, ge=0)
    release_date: datetime | None = None
    image: str | None = None

    display_size: float | None = Field(None, gt=0)
    display_type: str | None = None
    display_resolution: str | None = None
    refresh_rate: int | None = Field(None, gt=0)
    brightness: int | None = Field(None, gt=0)

    processor: str | None = None
    processor_brand: str | None = None
    ram: int | None = Field(None, gt=0)
    storage: int | None = Field(None, gt=0)
    expandable_storage: bool | None = None

    main_camera: str | None = None
    ultra_wide_camera: str | None = None
    telephoto_camera: str | None = None
    front_camera: str | None = None
    video_recording: str | None = None

    battery_capacity: int | None = Field(None, gt=0)
    charging_speed: int | None = Field(None, gt=0)
    wireless_charging: bool | None = None

    dimensions: str | None = None
    weight: int | None = Field(None, gt=0)
    build_material: str | None = None
    water_resistance: str | None = None

    five_g: bool | None = None
    wifi: str | None = None
    bluetooth: str | None = None
    nfc: bool | None = None

    operating_system: str | None = None
    os_version: str | None = None

    antutu_score: int | None = Field(None, ge=0)
    geekbench_single: int | None = Field(None, ge=0)
    geekbench_multi: int | None = Field(None, ge=0)

    fingerprint: bool | None = None
    face_unlock: bool | None = None
    headphone_jack: bool | None = None

    @field_validator(
        *_REQUIRED_DEVICE_FIELDS,
        "expandable_storage",
        "wireless_charging",
        "five_g",
        "nfc",
        "fingerprint",
        "face_unlock",
        "headphone_jack",
    )
    @classmethod
    def _not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("field may not be null")
        return v

    @field_validator("release_date")
    @classmethod
    def _release_date_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v) if v is not None else v

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class DeviceResponse(DeviceCreate):
    id: int
    created_at: datetime
    updated_at: datetime


class DeviceMetricsResponse(CamelModel):
    device_id: int
    performance_score: int
    value_score: int
    price_score: float
    antutu_per_dollar: int | None
    ram_per_dollar: int | None
    battery_per_dollar: int | None
    dollars_per_gb_ram: int
    camera_megapixels: int
    price_tier: str
    performance_tier: str
    battery_life_hours: float


# ==================================================
# BRANDS
# ==================================================

class BrandCreate(CamelModel):
    name: str = Field(..., min_length=1)
    logo: str | None = None
    description: str | None = None
    website: str | None = None


class BrandResponse(BrandCreate):
    id: int
    device_count: int


# ==================================================
# COMPARISONS
# ==================================================

class ComparisonCreate(CamelModel):
    name: str = Field(..., min_length=1)
    device_ids: str

    @field_validator("device_ids", mode="before")
    @classmethod
    def _encode_ids(cls, v: Any) -> Any:
        if isinstance(v, list):
            if not all(isinstance(i, int) and not isinstance(i, bool) for i in v):
                raise ValueError("deviceIds must contain only integers")
            return encode_device_ids(v)
        if isinstance(v, str):
            return encode_device_ids(decode_device_ids(v))
        return v


class ComparisonResponse(CamelModel):
    id: int
    name: str
    device_ids: str
    created_at: datetime


class CompareRequest(CamelModel):
    device_ids: list[int] = Field(..., min_length=2)
