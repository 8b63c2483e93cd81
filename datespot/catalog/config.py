from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_PACKAGED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the location catalog and the area list are read from.
    """

    data_dir: Path = Path(os.getenv("DATESPOT_DATA_DIR", str(_PACKAGED_DATA_DIR)))
    locations_filename: str = "locations.csv"
    areas_filename: str = "areas.csv"

    @property
    def locations_path(self) -> Path:
        return self.data_dir / self.locations_filename

    @property
    def areas_path(self) -> Path:
        return self.data_dir / self.areas_filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
