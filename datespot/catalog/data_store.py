from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from ..recommendations.models import Area, Coordinates, LocationRecord
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "id",
    "name",
    "description",
    "category",
    "price_range",
    "location",
    "estimated_cost",
    "duration",
    "best_time_to_visit",
    "latitude",
    "longitude",
    "image_url",
    "tags",
]

_catalog: tuple[LocationRecord, ...] | None = None
_areas: tuple[Area, ...] | None = None


class CatalogError(ValueError):
    """Raised when a catalog file is missing columns or holds an invalid row."""


def _clean(value: Any) -> Any:
    return None if pd.isna(value) else value


def _split_tags(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    return tuple(t.strip() for t in str(raw).split(",") if t.strip())


def _row_to_record(row: dict[str, Any]) -> LocationRecord:
    lat, lon = row.get("latitude"), row.get("longitude")
    coordinates = None
    if lat is not None and lon is not None:
        coordinates = Coordinates(latitude=float(lat), longitude=float(lon))

    return LocationRecord(
        id=str(row["id"]).strip(),
        name=row["name"],
        description=row.get("description") or "",
        category=row["category"],
        price_range=row["price_range"],
        location=row.get("location") or "",
        estimated_cost=float(row["estimated_cost"]),
        duration=row.get("duration") or "",
        best_time_to_visit=row.get("best_time_to_visit") or "",
        tags=_split_tags(row.get("tags")),
        coordinates=coordinates,
        image_url=row.get("image_url"),
    )


def load_catalog(path: Path) -> tuple[LocationRecord, ...]:
    """Read and validate a location table. Row numbers in errors are 1-based."""
    df = pd.read_csv(path, dtype=str)

    missing = [c for c in CATALOG_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"{path}: missing columns {', '.join(missing)}")

    records: list[LocationRecord] = []
    seen: set[str] = set()
    for index, raw in enumerate(df[CATALOG_COLUMNS].to_dict(orient="records"), start=1):
        row = {k: _clean(v) for k, v in raw.items()}
        try:
            record = _row_to_record(row)
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"{path}: row {index} is invalid: {exc}") from exc
        if record.id in seen:
            raise CatalogError(f"{path}: row {index} reuses id {record.id!r}")
        seen.add(record.id)
        records.append(record)

    return tuple(records)


def load_areas(path: Path) -> tuple[Area, ...]:
    df = pd.read_csv(path, dtype=str).fillna("")
    try:
        return tuple(Area(**row) for row in df[["name", "description"]].to_dict(orient="records"))
    except (KeyError, ValidationError) as exc:
        raise CatalogError(f"{path}: invalid area table: {exc}") from exc


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[LocationRecord, ...]:
    """Return the resident catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.locations_path)
        logger.info("Loaded %d catalog entries from %s", len(_catalog), config.locations_path)
    return _catalog


def get_areas(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Area, ...]:
    global _areas
    if _areas is None:
        _areas = load_areas(config.areas_path)
    return _areas


def get_location(location_id: str) -> LocationRecord | None:
    for record in get_catalog():
        if record.id == location_id:
            return record
    return None


def reset_catalog() -> None:
    global _catalog, _areas
    _catalog = None
    _areas = None
