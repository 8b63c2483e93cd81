from __future__ import annotations

from fastapi.testclient import TestClient

from datespot.analytics.aggregator import compute_analytics
from datespot.analytics.store import clear_events, get_events
from datespot.app import app
from datespot.library.reviews import clear_reviews
from datespot.recommendations.cache import clear_cache

client = TestClient(app)


def _login_user(c):
    c.post("/auth/login", json={"email": "user@datespot.app", "password": "user123"})


def _login_admin(c):
    c.post("/auth/login", json={"email": "admin@datespot.app", "password": "admin123"})


def test_analytics_returns_empty_initially():
    clear_events()
    clear_reviews()
    body = compute_analytics(get_events())
    assert body["total_searches"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["empty_result_rate"] == 0.0
    assert body["review_summary"] == {"total": 0, "avg_rating": 0.0}


def test_analytics_tracks_search():
    clear_events()
    clear_cache()
    _login_user(client)
    client.post("/recommendations", json={
        "budget": "premium", "style": "food", "location": "Independence",
    })
    _login_admin(client)
    body = client.get("/analytics").json()
    assert body["total_searches"] == 1
    assert body["style_usage"] == {"food": 1}
    assert body["budget_usage"] == {"premium": 1}
    assert body["tier_usage"] == {"budget_relaxed": 1}
    assert body["top_locations"] == [{"name": "Independence", "count": 1}]


def test_analytics_ignores_any_location_and_counts_cache_hits():
    clear_events()
    clear_cache()
    for _ in range(3):
        client.post("/recommendations", json={"budget": "budget", "style": "romantic"})
    _login_admin(client)
    body = client.get("/analytics").json()
    assert body["total_searches"] == 3
    assert body["top_locations"] == []
    assert body["tier_usage"] == {"budget_relaxed": 3}
    assert body["cache_stats"] == {"hits": 2, "misses": 1, "hit_rate": 66.7}


def test_analytics_review_summary():
    clear_reviews()
    _login_user(client)
    client.post("/reviews", json={"place_id": "1", "rating": 5})
    client.post("/reviews", json={"place_id": "2", "rating": 2})
    _login_admin(client)
    body = client.get("/analytics").json()
    assert body["review_summary"] == {"total": 2, "avg_rating": 3.5}


def test_search_events_record_tier_and_counts():
    clear_events()
    clear_cache()
    client.post("/recommendations", json={"budget": "budget", "style": "outdoor", "group_size": 3})
    (event,) = get_events("search")
    assert event["tier"] == "exact"
    assert event["group_size"] == 3
    assert event["results_returned"] == 1
    assert event["cache_hit"] is False
