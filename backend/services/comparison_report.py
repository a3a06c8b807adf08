# services/comparison_report.py

from collections.abc import Sequence

import pandas as pd

from models.records import DeviceRecord
from services import metrics

# attribute -> prefer_lower
WINNER_FIELDS = {
    "price": True,
    "display_size": False,
    "ram": False,
    "storage": False,
    "battery_capacity": False,
    "antutu_score": False,
}

REPORT_COLUMNS = [
    "id",
    "name",
    "brand",
    "price_usd",
    "price_tier",
    "performance_score",
    "performance_tier",
    "value_score",
    "antutu_per_dollar",
    "ram_per_dollar",
    "battery_per_dollar",
    "dollars_per_gb_ram",
    "camera_megapixels",
    "battery_life_hours",
    "display_score",
    "antutu_label",
    "geekbench_single_label",
    "battery_label",
    "camera_label",
    "display_size_label",
    "refresh_rate_label",
]


def _device_row(device: DeviceRecord) -> dict:
    megapixels = metrics.extract_megapixels(device.main_camera)
    return {
        "id": device.id,
        "name": device.name,
        "brand": device.brand,
        "price_usd": device.price / 100,
        "price_tier": metrics.price_tier(device),
        "performance_score": metrics.performance_score(device),
        "performance_tier": metrics.performance_tier(device),
        "value_score": metrics.value_score(device),
        "antutu_per_dollar": metrics.antutu_per_dollar(device),
        "ram_per_dollar": metrics.ram_per_dollar(device),
        "battery_per_dollar": metrics.battery_per_dollar(device),
        "dollars_per_gb_ram": metrics.dollars_per_gb_ram(device),
        "camera_megapixels": megapixels,
        "battery_life_hours": metrics.battery_life_hours(device.battery_capacity),
        "display_score": round(metrics.display_score(device), 1),
        "antutu_label": metrics.score_category(device.antutu_score, metrics.ANTUTU_CEILING).label,
        "geekbench_single_label": metrics.score_category(
            device.geekbench_single, metrics.GEEKBENCH_SINGLE_CEILING
        ).label,
        "battery_label": metrics.score_category(
            device.battery_capacity, metrics.BATTERY_CEILING_MAH
        ).label,
        "camera_label": metrics.score_category(megapixels, metrics.CAMERA_CEILING_MP).label,
        "display_size_label": metrics.score_category(
            device.display_size, metrics.DISPLAY_SIZE_CEILING
        ).label,
        "refresh_rate_label": metrics.score_category(
            device.refresh_rate, metrics.REFRESH_RATE_CEILING
        ).label,
    }


def build_comparison_frame(devices: Sequence[DeviceRecord]) -> pd.DataFrame:
    """
    One row per device, in the order given.
    """
    if not devices:
        return pd.DataFrame(columns=REPORT_COLUMNS)

    df = pd.DataFrame([_device_row(d) for d in devices], columns=REPORT_COLUMNS, dtype=object)
    # per-dollar ratios may be missing; keep them as None rather than NaN
    return df.where(pd.notnull(df), None)


def _winner_id(device: DeviceRecord | None) -> int | None:
    return device.id if device is not None else None


def summarize_comparison(devices: Sequence[DeviceRecord]) -> dict:
    df = build_comparison_frame(devices)

    winners: dict[str, int | None] = {
        field: _winner_id(metrics.pick_winner(devices, field, prefer_lower=prefer_lower))
        for field, prefer_lower in WINNER_FIELDS.items()
    }
    for category in metrics.CATEGORY_KEYS:
        winners[category] = _winner_id(metrics.best_in_category(devices, category))

    return {
        "devices": df.to_dict(orient="records"),
        "winners": winners,
    }
