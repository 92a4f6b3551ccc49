"""
Generate src/data/suburbs.json from a seed CSV of suburbs.

Seed columns: name, postcode, lat, lng, and optionally state and population.
Distances and directions are computed from the business center, suburbs
outside the radius are dropped, and the rest are written nearest first.

Usage:
    python scripts/generate_suburbs.py --input data/adelaide_suburbs.csv \
        --lat -34.8517 --lng 138.5829 --radius 50 --state SA
"""

import argparse
import sys

import pandas as pd

from service_areas.config import settings
from service_areas.data.catalogue import build_catalogue_file, write_catalogue_file
from service_areas.data.models import Coordinates

REQUIRED_COLUMNS = {"name", "lat", "lng"}
NUMERIC_COLUMNS = {"lat", "lng", "population"}
BANDS_KM = (10, 20, 30, 40, 50)


def read_seed_rows(path: str) -> list[dict]:
    # postcodes stay text; numeric columns are converted below
    df = pd.read_csv(path, dtype=str)
    df.columns = [c.strip().lower() for c in df.columns]

    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise SystemExit(f"Seed file {path} is missing columns: {', '.join(sorted(missing))}")

    for column in NUMERIC_COLUMNS & set(df.columns):
        df[column] = pd.to_numeric(df[column], errors="coerce")

    df = df.dropna(subset=["name", "lat", "lng"])
    # NaN -> None so optional columns read as "no data"
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def print_breakdown(distances: list[float]) -> None:
    print("\nDistance breakdown:")
    lower = 0
    for upper in BANDS_KM:
        if lower == 0:
            count = sum(1 for d in distances if d <= upper)
        else:
            count = sum(1 for d in distances if lower < d <= upper)
        print(f"  {lower}-{upper}km: {count} suburbs")
        lower = upper


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--input", required=True, help="Seed CSV path")
    parser.add_argument("--output", default=settings.catalogue.path, help="Catalogue JSON path")
    parser.add_argument("--lat", type=float, required=True, help="Center latitude")
    parser.add_argument("--lng", type=float, required=True, help="Center longitude")
    parser.add_argument("--radius", type=float, default=settings.locations.service_radius_km)
    parser.add_argument("--state", default="", help="State for rows without one")
    args = parser.parse_args(argv)

    print("--- Generating suburbs catalogue ---")
    seeds = read_seed_rows(args.input)
    print(f"Read {len(seeds)} seed suburbs from {args.input}")

    document = build_catalogue_file(
        seeds,
        center=Coordinates(lat=args.lat, lng=args.lng),
        radius_km=args.radius,
        default_state=args.state,
    )
    print(f"Found {document.count} suburbs within {args.radius:g}km")

    path = write_catalogue_file(document, args.output, lock_timeout=settings.catalogue.lock_timeout)
    print(f"Saved to: {path}")

    print_breakdown([row.distance_km for row in document.suburbs])
    return 0


if __name__ == "__main__":
    sys.exit(main())
