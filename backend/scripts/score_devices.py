import argparse

import pandas as pd

from db.store import create_store
from services.catalog_repository import DeviceFilters
from services.comparison_report import build_comparison_frame

DEFAULT_COLUMNS = [
    "id",
    "name",
    "price_usd",
    "performance_score",
    "value_score",
    "antutu_per_dollar",
    "camera_megapixels",
]


def build_table(brand: str | None = None, sort_by: str = "performance_score") -> pd.DataFrame:
    store = create_store(seed=True)
    devices = store.list_devices(DeviceFilters(brand=brand))
    df = build_comparison_frame(devices)
    if df.empty:
        return df
    if sort_by not in df.columns:
        raise SystemExit(f"Unknown column: {sort_by}")
    # kind="stable" keeps release order for equal scores
    return df.sort_values(sort_by, ascending=False, kind="stable").reset_index(drop=True)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Print derived scores for the sample catalog.")
    parser.add_argument("--brand", help="Only devices of this brand (case-insensitive)")
    parser.add_argument("--sort-by", default="performance_score", help="Report column to sort on")
    parser.add_argument("--all-columns", action="store_true", help="Show every report column")
    args = parser.parse_args(argv)

    df = build_table(brand=args.brand, sort_by=args.sort_by)
    if df.empty:
        print("No devices found")
        return

    columns = list(df.columns) if args.all_columns else DEFAULT_COLUMNS
    print(df[columns].to_string(index=False))


if __name__ == "__main__":
    main()
