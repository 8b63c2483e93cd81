from __future__ import annotations

from collections import Counter
from typing import Any

from ..library.reviews import get_all_reviews


def _rate(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 3) if times else 0.0

    style_usage = Counter(s.get("style", "unknown") for s in searches)
    budget_usage = Counter(s.get("budget", "unknown") for s in searches)
    tier_usage = Counter(s.get("tier", "unknown") for s in searches)

    # "any" means no area filter, so it is not a location
    loc_counter: Counter[str] = Counter(
        s["location"] for s in searches if s.get("location") and s["location"] != "any"
    )
    top_locations = [{"name": n, "count": c} for n, c in loc_counter.most_common(10)]

    empty_results = sum(1 for s in searches if s.get("results_returned", 0) == 0)
    cache_hits = sum(1 for s in searches if s.get("cache_hit"))

    reviews = get_all_reviews()
    avg_rating = round(sum(r.rating for r in reviews) / len(reviews), 2) if reviews else 0.0

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "style_usage": dict(style_usage),
        "budget_usage": dict(budget_usage),
        "top_locations": top_locations,
        "tier_usage": dict(tier_usage),
        "empty_result_rate": _rate(empty_results, total),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": _rate(cache_hits, total),
        },
        "review_summary": {
            "total": len(reviews),
            "avg_rating": avg_rating,
        },
    }
