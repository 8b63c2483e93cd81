from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class RecommendationConfig:
    max_results: int = 6
    highlight_tags: int = 3
    cache_ttl_seconds: int = int(os.getenv("DATESPOT_CACHE_TTL", "300"))
    cache_enabled: bool = os.getenv("DATESPOT_CACHE_ENABLED", "1").lower() in {"1", "true", "yes", "on"}


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
