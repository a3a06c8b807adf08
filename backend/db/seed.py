from datetime import datetime, timezone

from services.catalog_repository import CatalogRepository

SAMPLE_BRANDS = [
    {
        "name": "Samsung",
        "logo": "https://cdn.jsdelivr.net/npm/simple-icons@v9/icons/samsung.svg",
        "description": "South Korean multinational electronics company",
        "website": "https://samsung.com",
    },
    {
        "name": "Apple",
        "logo": "https://cdn.jsdelivr.net/npm/simple-icons@v9/icons/apple.svg",
        "description": "American technology company",
        "website": "https://apple.com",
    },
    {
        "name": "Google",
        "logo": "https://cdn.jsdelivr.net/npm/simple-icons@v9/icons/google.svg",
        "description": "American technology company",
        "website": "https://google.com",
    },
    {
        "name": "OnePlus",
        "logo": "https://cdn.jsdelivr.net/npm/simple-icons@v9/icons/oneplus.svg",
        "description": "Chinese smartphone manufacturer",
        "website": "https://oneplus.com",
    },
    {
        "name": "Xiaomi",
        "logo": "https://cdn.jsdelivr.net/npm/simple-icons@v9/icons/xiaomi.svg",
        "description": "Chinese electronics company",
        "website": "https://mi.com",
    },
]


def _released(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


SAMPLE_DEVICES = [
    {
        "name": "Galaxy S24 Ultra",
        "brand": "Samsung",
        "model": "SM-S928B",
        "price": 129900,
        "release_date": _released(2024, 1, 24),
        "image": "https://images.unsplash.com/photo-1592750475338-74b7b21085ab?auto=format&fit=crop&w=600&h=400",
        "display_size": 6.8,
        "display_type": "Dynamic AMOLED 2X",
        "display_resolution": "3120 x 1440",
        "refresh_rate": 120,
        "brightness": 2600,
        "processor": "Snapdragon 8 Gen 3",
        "processor_brand": "Qualcomm",
        "ram": 12,
        "storage": 256,
        "expandable_storage": True,
        "main_camera": "200MP f/1.7 OIS",
        "ultra_wide_camera": "12MP f/2.2",
        "telephoto_camera": "50MP f/3.4 OIS + 10MP f/2.4 OIS",
        "front_camera": "12MP f/2.2",
        "video_recording": "8K@30fps, 4K@60fps",
        "battery_capacity": 5000,
        "charging_speed": 45,
        "wireless_charging": True,
        "dimensions": "162.3 x 79.0 x 8.6 mm",
        "weight": 232,
        "build_material": "Titanium frame, Gorilla Glass Victus 2",
        "water_resistance": "IP68",
        "five_g": True,
        "wifi": "Wi-Fi 7",
        "bluetooth": "5.3",
        "nfc": True,
        "operating_system": "Android",
        "os_version": "14",
        "antutu_score": 1650000,
        "geekbench_single": 2100,
        "geekbench_multi": 6500,
        "fingerprint": True,
        "face_unlock": True,
        "headphone_jack": False,
    },
    {
        "name": "iPhone 15 Pro",
        "brand": "Apple",
        "model": "A3108",
        "price": 99900,
        "release_date": _released(2023, 9, 22),
        "image": "https://images.unsplash.com/photo-1695048133142-1a20484d2569?auto=format&fit=crop&w=600&h=400",
        "display_size": 6.1,
        "display_type": "Super Retina XDR OLED",
        "display_resolution": "2556 x 1179",
        "refresh_rate": 120,
        "brightness": 2000,
        "processor": "A17 Pro",
        "processor_brand": "Apple",
        "ram": 8,
        "storage": 128,
        "expandable_storage": False,
        "main_camera": "48MP f/1.78 OIS",
        "ultra_wide_camera": "13MP f/2.2",
        "telephoto_camera": "12MP f/2.8 OIS",
        "front_camera": "12MP f/1.9",
        "video_recording": "4K@60fps, ProRes",
        "battery_capacity": 3274,
        "charging_speed": 27,
        "wireless_charging": True,
        "dimensions": "146.6 x 70.6 x 8.25 mm",
        "weight": 187,
        "build_material": "Titanium frame, Ceramic Shield",
        "water_resistance": "IP68",
        "five_g": True,
        "wifi": "Wi-Fi 6E",
        "bluetooth": "5.3",
        "nfc": True,
        "operating_system": "iOS",
        "os_version": "17",
        "antutu_score": 1580000,
        "geekbench_single": 2900,
        "geekbench_multi": 7200,
        "fingerprint": False,
        "face_unlock": True,
        "headphone_jack": False,
    },
    {
        "name": "Pixel 8 Pro",
        "brand": "Google",
        "model": "GC3VE",
        "price": 89900,
        "release_date": _released(2023, 10, 12),
        "image": "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?auto=format&fit=crop&w=600&h=400",
        "display_size": 6.7,
        "display_type": "LTPO OLED",
        "display_resolution": "2992 x 1344",
        "refresh_rate": 120,
        "brightness": 2400,
        "processor": "Google Tensor G3",
        "processor_brand": "Google",
        "ram": 12,
        "storage": 128,
        "expandable_storage": False,
        "main_camera": "50MP f/1.68 OIS",
        "ultra_wide_camera": "48MP f/1.95",
        "telephoto_camera": "48MP f/2.8 OIS",
        "front_camera": "10.5MP f/2.2",
        "video_recording": "4K@60fps, 8K@30fps",
        "battery_capacity": 5050,
        "charging_speed": 30,
        "wireless_charging": True,
        "dimensions": "162.6 x 76.5 x 8.8 mm",
        "weight": 213,
        "build_material": "Aluminum frame, Gorilla Glass Victus 2",
        "water_resistance": "IP68",
        "five_g": True,
        "wifi": "Wi-Fi 7",
        "bluetooth": "5.3",
        "nfc": True,
        "operating_system": "Android",
        "os_version": "14",
        "antutu_score": 1100000,
        "geekbench_single": 1760,
        "geekbench_multi": 4442,
        "fingerprint": True,
        "face_unlock": True,
        "headphone_jack": False,
    },
    {
        "name": "OnePlus 12",
        "brand": "OnePlus",
        "model": "CPH2573",
        "price": 79900,
        "release_date": _released(2024, 1, 23),
        "image": "https://images.unsplash.com/photo-1598300042247-d088f8ab3a91?auto=format&fit=crop&w=600&h=400",
        "display_size": 6.82,
        "display_type": "LTPO3 AMOLED",
        "display_resolution": "3168 x 1440",
        "refresh_rate": 120,
        "brightness": 4500,
        "processor": "Snapdragon 8 Gen 3",
        "processor_brand": "Qualcomm",
        "ram": 16,
        "storage": 512,
        "expandable_storage": False,
        "main_camera": "50MP f/1.6 OIS",
        "ultra_wide_camera": "64MP f/2.5",
        "telephoto_camera": "48MP f/2.8 OIS",
        "front_camera": "32MP f/2.4",
        "video_recording": "8K@24fps, 4K@60fps",
        "battery_capacity": 5400,
        "charging_speed": 100,
        "wireless_charging": True,
        "dimensions": "164.3 x 75.8 x 9.15 mm",
        "weight": 220,
        "build_material": "Aluminum frame, Gorilla Glass Victus 2",
        "water_resistance": "IP65",
        "five_g": True,
        "wifi": "Wi-Fi 7",
        "bluetooth": "5.4",
        "nfc": True,
        "operating_system": "Android",
        "os_version": "14",
        "antutu_score": 1620000,
        "geekbench_single": 2150,
        "geekbench_multi": 6400,
        "fingerprint": True,
        "face_unlock": True,
        "headphone_jack": False,
    },
    {
        "name": "Galaxy A54 5G",
        "brand": "Samsung",
        "model": "SM-A546B",
        "price": 44900,
        "release_date": _released(2023, 3, 24),
        "image": "https://images.unsplash.com/photo-1574944985070-8f3ebc6b79d2?auto=format&fit=crop&w=600&h=400",
        "display_size": 6.4,
        "display_type": "Super AMOLED",
        "display_resolution": "2340 x 1080",
        "refresh_rate": 120,
        "brightness": 1000,
        "processor": "Exynos 1380",
        "processor_brand": "Samsung",
        "ram": 8,
        "storage": 256,
        "expandable_storage": True,
        "main_camera": "50MP f/1.8 OIS",
        "ultra_wide_camera": "12MP f/2.2",
        "telephoto_camera": "5MP f/2.4 Macro",
        "front_camera": "32MP f/2.2",
        "video_recording": "4K@30fps",
        "battery_capacity": 5000,
        "charging_speed": 25,
        "wireless_charging": False,
        "dimensions": "158.2 x 76.7 x 8.2 mm",
        "weight": 202,
        "build_material": "Plastic frame, Gorilla Glass 5",
        "water_resistance": "IP67",
        "five_g": True,
        "wifi": "Wi-Fi 6",
        "bluetooth": "5.3",
        "nfc": True,
        "operating_system": "Android",
        "os_version": "13",
        "antutu_score": 485000,
        "geekbench_single": 1050,
        "geekbench_multi": 3100,
        "fingerprint": True,
        "face_unlock": True,
        "headphone_jack": False,
    },
]


def seed_sample_data(store: CatalogRepository) -> tuple[int, int]:
    """Load the bundled brands and phones. Returns (brands, devices) created."""
    for brand in SAMPLE_BRANDS:
        store.create_brand(brand)
    for device in SAMPLE_DEVICES:
        store.create_device(device)
    return len(SAMPLE_BRANDS), len(SAMPLE_DEVICES)
