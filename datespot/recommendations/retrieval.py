from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from ..catalog.data_store import get_catalog
from .cache import cache_get, cache_set
from .config import DEFAULT_RECOMMENDATION_CONFIG, RecommendationConfig
from .formatting import budget_range_label, format_currency
from .models import (
    LocationRecord,
    MatchTier,
    PreferenceRecord,
    RecommendationItem,
    RecommendationResponse,
)
from .selector import select_with_tier

logger = logging.getLogger(__name__)


def _to_item(record: LocationRecord, config: RecommendationConfig) -> RecommendationItem:
    return RecommendationItem(
        location=record,
        cost_display=format_currency(record.estimated_cost),
        highlight_tags=list(record.tags[: config.highlight_tags]),
    )


def _record_search(
    preferences: PreferenceRecord,
    response: RecommendationResponse,
    start_time: float,
    cache_hit: bool,
) -> None:
    record_event("search", {
        "budget": preferences.budget.value,
        "style": preferences.style.value,
        "location": preferences.location,
        "group_size": preferences.group_size,
        "tier": response.tier.value,
        "total_matches": response.total_matches,
        "results_returned": len(response.recommendations),
        "response_time_ms": round((time.time() - start_time) * 1000, 3),
        "cache_hit": cache_hit,
    })


def get_recommendations(
    preferences: PreferenceRecord,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> RecommendationResponse:
    start_time = time.time()

    if config.cache_enabled:
        cached = cache_get(preferences, config)
        if cached is not None:
            _record_search(preferences, cached, start_time, cache_hit=True)
            return cached

    selection = select_with_tier(preferences, get_catalog(), limit=config.max_results)

    if selection.tier is MatchTier.budget_relaxed:
        logger.info("No exact matches for %s, relaxed budget constraint", preferences.style.value)
    elif selection.tier is MatchTier.style_only:
        logger.info("Still no matches, filtered by style %s only", preferences.style.value)
    logger.debug(
        "Found %d recommendations (%d matched)",
        len(selection.items),
        selection.total_matches,
    )

    response = RecommendationResponse(
        recommendations=[_to_item(r, config) for r in selection.items],
        tier=selection.tier,
        total_matches=selection.total_matches,
        budget_label=budget_range_label(preferences.budget),
    )

    if config.cache_enabled:
        cache_set(preferences, response)

    _record_search(preferences, response, start_time, cache_hit=False)
    return response
