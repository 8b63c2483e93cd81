from fastapi.testclient import TestClient

from datespot.app import app
from datespot.library.favorites import clear_favorites
from datespot.library.searches import clear_all_searches
from datespot.recommendations.cache import clear_cache

client = TestClient(app)


def _login(c):
    c.post("/auth/login", json={"email": "user@datespot.app", "password": "user123"})


def _names(body) -> list[str]:
    return [item["location"]["name"] for item in body["recommendations"]]


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata_lists_styles_budgets_and_areas():
    body = client.get("/metadata").json()
    assert body["styles"] == ["romantic", "adventure", "cultural", "relaxing", "food", "outdoor"]
    assert {"value": "premium", "label": "₦10,000+"} in body["budgets"]
    assert any(a["name"] == "Ogui" for a in body["areas"])


def test_locations_lists_catalog():
    resp = client.get("/locations")
    assert resp.status_code == 200
    assert len(resp.json()) == 12


def test_location_detail_and_404():
    assert client.get("/locations/2").json()["name"] == "Milken Hill Resort"
    assert client.get("/locations/nope").status_code == 404


def test_recommendations_exact_match():
    resp = client.post("/recommendations", json={
        "budget": "budget", "style": "adventure", "location": "any", "group_size": 2,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert _names(body) == ["Awhum Waterfall"]
    assert body["tier"] == "exact"
    assert body["total_matches"] == 1
    assert body["budget_label"] == "₦500 - ₦3,000"


def test_recommendations_item_formatting():
    body = client.post("/recommendations", json={"budget": "budget", "style": "adventure"}).json()
    item = body["recommendations"][0]
    assert item["cost_display"] == "₦3,000"
    assert item["highlight_tags"] == ["waterfall", "hiking", "swimming"]
    assert item["location"]["coordinates"] == {"latitude": 6.35, "longitude": 7.45}


def test_recommendations_premium_food_is_budget_relaxed_descending():
    body = client.post("/recommendations", json={"budget": "premium", "style": "food"}).json()
    assert body["tier"] == "budget_relaxed"
    assert _names(body) == ["Shoprite Food Court", "Local Pepper Soup Joints"]


def test_recommendations_location_defaults_to_any():
    body = client.post("/recommendations", json={"budget": "premium", "style": "romantic"}).json()
    assert _names(body) == ["Milken Hill Resort"]


def test_recommendations_rejects_unknown_style():
    resp = client.post("/recommendations", json={"budget": "budget", "style": "nightlife"})
    assert resp.status_code == 422


def test_recommendations_rejects_unknown_budget():
    resp = client.post("/recommendations", json={"budget": "cheap", "style": "food"})
    assert resp.status_code == 422


def test_recommendations_rejects_bad_group_size():
    resp = client.post("/recommendations", json={
        "budget": "budget", "style": "food", "group_size": 0,
    })
    assert resp.status_code == 422


def test_guest_search_is_not_saved():
    clear_all_searches()
    guest = TestClient(app)
    resp = guest.post("/recommendations", json={"budget": "budget", "style": "food"})
    assert resp.status_code == 200

    _login(client)
    assert client.get("/searches").json() == []


def test_signed_in_search_is_saved():
    clear_all_searches()
    _login(client)
    client.post("/recommendations", json={
        "budget": "moderate", "style": "outdoor", "location": "any", "group_size": 4,
    })
    saved = client.get("/searches").json()
    assert len(saved) == 1
    assert saved[0]["search_query"]["group_size"] == 4
    assert saved[0]["result_ids"] == ["12", "11"]


def test_saved_places_are_marked_for_signed_in_users():
    clear_favorites()
    clear_cache()
    _login(client)
    client.post("/favorites", json={"place_id": "3"})

    body = client.post("/recommendations", json={"budget": "budget", "style": "adventure"}).json()
    assert _names(body) == ["Awhum Waterfall"]
    assert body["recommendations"][0]["is_favorite"] is True

    # Same preferences hit the cache; the shared entry carries no marks
    guest = TestClient(app)
    body = guest.post("/recommendations", json={"budget": "budget", "style": "adventure"}).json()
    assert body["recommendations"][0]["is_favorite"] is False


def test_unsaved_places_are_not_marked():
    clear_favorites()
    _login(client)
    body = client.post("/recommendations", json={"budget": "premium", "style": "food"}).json()
    assert [i["is_favorite"] for i in body["recommendations"]] == [False, False]
