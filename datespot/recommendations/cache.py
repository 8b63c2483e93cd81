"""In-process TTL cache for recommendation responses, keyed on the preferences."""
from __future__ import annotations

import hashlib
import json
import time
from typing import Any

from .config import DEFAULT_RECOMMENDATION_CONFIG, RecommendationConfig
from .models import PreferenceRecord, RecommendationResponse

_entries: dict[str, tuple[float, RecommendationResponse]] = {}
_hits: int = 0
_misses: int = 0


def _cache_key(preferences: PreferenceRecord) -> str:
    payload = json.dumps(preferences.model_dump(mode="json"), sort_keys=True)
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def cache_get(
    preferences: PreferenceRecord,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> RecommendationResponse | None:
    global _hits, _misses
    key = _cache_key(preferences)
    entry = _entries.get(key)
    if entry is not None:
        stored_at, response = entry
        if time.time() - stored_at < config.cache_ttl_seconds:
            _hits += 1
            return response
        del _entries[key]
    _misses += 1
    return None


def cache_set(preferences: PreferenceRecord, response: RecommendationResponse) -> None:
    _entries[_cache_key(preferences)] = (time.time(), response)


def get_cache_stats() -> dict[str, Any]:
    lookups = _hits + _misses
    return {
        "size": len(_entries),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / lookups * 100, 1) if lookups else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _entries.clear()
    _hits = 0
    _misses = 0
