from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from datespot.app import app
from datespot.recommendations.cache import clear_cache, get_cache_stats
from datespot.recommendations.config import RecommendationConfig
from datespot.recommendations.models import PreferenceRecord
from datespot.recommendations.retrieval import get_recommendations

client = TestClient(app)

PREFS = PreferenceRecord(budget="budget", style="cultural")


def _login_user(c):
    c.post("/auth/login", json={"email": "user@datespot.app", "password": "user123"})


def _login_admin(c):
    c.post("/auth/login", json={"email": "admin@datespot.app", "password": "admin123"})


def test_cache_miss_then_hit():
    clear_cache()
    first = get_recommendations(PREFS)
    assert get_cache_stats()["misses"] == 1

    second = get_recommendations(PREFS)
    stats = get_cache_stats()
    assert stats["hits"] == 1
    assert stats["size"] == 1
    assert second is first


def test_cache_different_preferences_miss():
    clear_cache()
    get_recommendations(PREFS)
    get_recommendations(PreferenceRecord(budget="budget", style="cultural", location="Ngwo"))
    stats = get_cache_stats()
    assert stats["misses"] == 2
    assert stats["hits"] == 0


def test_cache_entry_expires():
    clear_cache()
    config = RecommendationConfig(cache_ttl_seconds=0)
    get_recommendations(PREFS, config)
    get_recommendations(PREFS, config)
    stats = get_cache_stats()
    assert stats["hits"] == 0
    assert stats["misses"] == 2


def test_cache_disabled_skips_lookup():
    clear_cache()
    config = RecommendationConfig(cache_enabled=False)
    with patch("datespot.recommendations.retrieval.cache_get") as mock_get:
        get_recommendations(PREFS, config)
    mock_get.assert_not_called()
    assert get_cache_stats()["size"] == 0


def test_cache_stats_endpoint():
    clear_cache()
    client.post("/recommendations", json={"budget": "budget", "style": "cultural"})
    client.post("/recommendations", json={"budget": "budget", "style": "cultural"})
    _login_admin(client)
    resp = client.get("/cache/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert body["hits"] == 1
    assert body["hit_rate"] == 50.0


def test_cache_stats_requires_admin():
    c = TestClient(app)
    _login_user(c)
    assert c.get("/cache/stats").status_code == 403
