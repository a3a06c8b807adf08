"""
Derived scores and rankings for catalog devices.

Two absence policies live here and must not be mixed up:

* scoring (performance_score and friends) treats a missing benchmark as
  "earns no points", while its weight still counts toward the maximum;
* ranking (pick_winner) substitutes 0 for a missing value so every
  candidate can be ordered.
"""

import logging
import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from models.records import DeviceRecord

logger = logging.getLogger(__name__)

# Reference ceilings
ANTUTU_CEILING = 2_000_000
GEEKBENCH_SINGLE_CEILING = 3000
GEEKBENCH_MULTI_CEILING = 8000
RAM_CEILING_GB = 24
STORAGE_CEILING_GB = 1024
BATTERY_CEILING_MAH = 6000
CAMERA_CEILING_MP = 200
DISPLAY_SIZE_CEILING = 7
REFRESH_RATE_CEILING = 120
DISPLAY_PRODUCT_CEILING = DISPLAY_SIZE_CEILING * REFRESH_RATE_CEILING

ANTUTU_WEIGHT = 40
GEEKBENCH_WEIGHT = 30
RAM_WEIGHT = 15
STORAGE_WEIGHT = 15

CATEGORY_BANDS = (
    (90, "Excellent"),
    (75, "Very Good"),
    (60, "Good"),
    (45, "Average"),
)
CATEGORY_FLOOR = "Below Average"
NOT_AVAILABLE = "N/A"

_MEGAPIXEL_RE = re.compile(r"\s*(\d+)")


@dataclass(frozen=True)
class ScoreCategory:
    percentage: float
    label: str


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _dollars(device: DeviceRecord) -> float:
    return device.price / 100


# ---------- SCORES ----------

def performance_score(device: DeviceRecord) -> int:
    earned = 0.0
    possible = 0

    if device.antutu_score is not None:
        earned += min(device.antutu_score / ANTUTU_CEILING, 1) * ANTUTU_WEIGHT
    possible += ANTUTU_WEIGHT

    if device.geekbench_single is not None and device.geekbench_multi is not None:
        geekbench = (
            device.geekbench_single / GEEKBENCH_SINGLE_CEILING
            + device.geekbench_multi / GEEKBENCH_MULTI_CEILING
        ) / 2
        earned += min(geekbench, 1) * GEEKBENCH_WEIGHT
    possible += GEEKBENCH_WEIGHT

    earned += min(device.ram / RAM_CEILING_GB, 1) * RAM_WEIGHT
    possible += RAM_WEIGHT

    earned += min(device.storage / STORAGE_CEILING_GB, 1) * STORAGE_WEIGHT
    possible += STORAGE_WEIGHT

    return int(round_half_up(earned / possible * 100))


def price_score(device: DeviceRecord) -> float:
    """Lower price, higher score; reaches 0 at $2000."""
    return max(0.0, 100 - _dollars(device) / 20)


def value_score(device: DeviceRecord) -> int:
    return int(round_half_up((performance_score(device) + price_score(device)) / 2))


def display_score(device: DeviceRecord) -> float:
    product = device.display_size * device.refresh_rate
    return min(product / DISPLAY_PRODUCT_CEILING, 1) * 100


# ---------- PER-DOLLAR RATIOS ----------

def _per_dollar(amount: float, device: DeviceRecord) -> int | None:
    dollars = _dollars(device)
    if dollars <= 0:
        return None
    return int(round_half_up(amount / dollars))


def antutu_per_dollar(device: DeviceRecord) -> int | None:
    if device.antutu_score is None:
        return None
    return _per_dollar(device.antutu_score, device)


def ram_per_dollar(device: DeviceRecord) -> int | None:
    return _per_dollar(device.ram * 1000, device)


def battery_per_dollar(device: DeviceRecord) -> int | None:
    return _per_dollar(device.battery_capacity * 10, device)


def dollars_per_gb_ram(device: DeviceRecord) -> int:
    return int(round_half_up(_dollars(device) / device.ram))


# ---------- LABELS ----------

def score_category(score: float | None, max_score: float) -> ScoreCategory:
    if not score:
        return ScoreCategory(percentage=0.0, label=NOT_AVAILABLE)

    percentage = min(score / max_score * 100, 100.0)
    for threshold, label in CATEGORY_BANDS:
        if percentage >= threshold:
            return ScoreCategory(percentage=percentage, label=label)
    return ScoreCategory(percentage=percentage, label=CATEGORY_FLOOR)


def price_tier(device: DeviceRecord) -> str:
    if device.price > 100000:
        return "Premium"
    if device.price > 60000:
        return "Flagship"
    if device.price > 30000:
        return "Mid-range"
    return "Budget"


def performance_tier(device: DeviceRecord) -> str:
    antutu = device.antutu_score
    if antutu is None:
        return "Unknown"
    if antutu > 1_500_000:
        return "Flagship"
    if antutu > 1_000_000:
        return "High-end"
    if antutu > 600_000:
        return "Mid-range"
    if antutu > 300_000:
        return "Entry-level"
    return "Basic"


def battery_life_hours(capacity_mah: int, efficiency: float = 1.0) -> float:
    # rough screen-on estimate: 3h per 1000 mAh
    return round_half_up(capacity_mah / 1000 * 3 * efficiency, 1)


# ---------- CAMERA ----------

def extract_megapixels(camera: str | None) -> int:
    """
    Leading integer before the first "MP", e.g. "200MP f/1.7 OIS" -> 200.
    Anything else yields 0 and is logged so bad catalog data is visible.
    """
    if not camera:
        return 0

    head, sep, _ = camera.partition("MP")
    match = _MEGAPIXEL_RE.match(head) if sep else None
    if match is None:
        logger.warning("Could not parse megapixels from camera description %r", camera)
        return 0
    return int(match.group(1))


# ---------- FEATURES ----------

def _has_oled(device: DeviceRecord) -> bool:
    display = device.display_type.lower()
    return "oled" in display or "amoled" in display


FEATURE_PREDICATES = {
    "5G Support": lambda d: d.five_g,
    "Wireless Charging": lambda d: d.wireless_charging,
    "Fast Charging": lambda d: d.charging_speed is not None and d.charging_speed >= 30,
    "Water Resistant": lambda d: bool(d.water_resistance),
    "Fingerprint Scanner": lambda d: d.fingerprint,
    "Face Unlock": lambda d: d.face_unlock,
    "Expandable Storage": lambda d: d.expandable_storage,
    "High Refresh Rate": lambda d: d.refresh_rate >= 90,
    "OLED Display": _has_oled,
}


def matches_features(device: DeviceRecord, features: Iterable[str]) -> bool:
    for feature in features:
        predicate = FEATURE_PREDICATES.get(feature)
        if predicate is not None and not predicate(device):
            return False
    return True


# ---------- RANKING ----------

def pick_winner(
    devices: Sequence[DeviceRecord],
    field: str,
    prefer_lower: bool = False,
) -> DeviceRecord | None:
    """
    Best device for one numeric attribute. Missing values rank as 0 and
    the earliest candidate wins a tie.
    """
    if not devices:
        return None

    def value(device: DeviceRecord) -> float:
        raw = getattr(device, field)
        return 0 if raw is None else raw

    winner = devices[0]
    for current in devices[1:]:
        if prefer_lower:
            if value(current) < value(winner):
                winner = current
        elif value(current) > value(winner):
            winner = current
    return winner


CATEGORY_KEYS = {
    "performance": performance_score,
    "value": value_score,
    "battery": lambda d: d.battery_capacity,
    "camera": lambda d: extract_megapixels(d.main_camera),
}


def best_in_category(devices: Sequence[DeviceRecord], category: str) -> DeviceRecord | None:
    key = CATEGORY_KEYS.get(category)
    if key is None:
        raise ValueError(f"Unknown category: {category}")
    if not devices:
        return None

    best = devices[0]
    best_value = key(best)
    for current in devices[1:]:
        current_value = key(current)
        if current_value > best_value:
            best, best_value = current, current_value
    return best
