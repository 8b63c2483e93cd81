from __future__ import annotations

import os

from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .auth.dependencies import get_current_user, require_admin, require_user
from .auth.models import LoginRequest, RegisterRequest, SessionUser
from .auth.users import DuplicateAccountError, RegistrationError, authenticate, register
from .catalog.data_store import get_areas, get_catalog, get_location
from .library.favorites import add_favorite, favorite_ids, list_favorites, remove_favorite
from .library.models import (
    FavoritePlace,
    FavoriteRequest,
    RecentSearch,
    Review,
    ReviewRequest,
    SettingsUpdate,
    UserSettings,
)
from .library.reviews import add_review, delete_review, get_reviews_for_place, list_reviews
from .library.searches import clear_searches, delete_search, list_searches, record_search
from .library.settings import get_settings, update_settings
from .recommendations.cache import get_cache_stats
from .recommendations.formatting import budget_range_label
from .recommendations.models import (
    Budget,
    LocationRecord,
    PreferenceRecord,
    RecommendationResponse,
    Style,
)
from .recommendations.retrieval import get_recommendations

app = FastAPI(title="Date Spot Recommendation API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "datespot-secret-change-in-production"),
)


def _location_or_404(place_id: str) -> LocationRecord:
    location = get_location(place_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Selected place not found")
    return location


def _mark_favorites(
    response: RecommendationResponse, saved: set[str]
) -> RecommendationResponse:
    """Copy *response* with each saved place flagged. Cached responses stay unmarked."""
    if not saved:
        return response
    items = [
        item.model_copy(update={"is_favorite": item.location.id in saved})
        for item in response.recommendations
    ]
    return response.model_copy(update={"recommendations": items})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "styles": [s.value for s in Style],
        "budgets": [
            {"value": b.value, "label": budget_range_label(b)} for b in Budget
        ],
        "areas": [a.model_dump() for a in get_areas()],
    }


@app.get("/locations", response_model=list[LocationRecord])
def locations() -> list[LocationRecord]:
    return list(get_catalog())


@app.get("/locations/{place_id}", response_model=LocationRecord)
def location_detail(place_id: str) -> LocationRecord:
    return _location_or_404(place_id)


@app.get("/locations/{place_id}/reviews", response_model=list[Review])
def location_reviews(place_id: str) -> list[Review]:
    return get_reviews_for_place(_location_or_404(place_id).id)


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: PreferenceRecord,
    user: SessionUser | None = Depends(get_current_user),
) -> RecommendationResponse:
    response = get_recommendations(body)

    # Guests can search, only signed-in users get a history and saved marks
    if user is not None:
        record_search(
            user.email,
            body,
            [item.location.id for item in response.recommendations],
        )
        response = _mark_favorites(response, favorite_ids(user.email))

    return response


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/register", status_code=201)
def register_account(body: RegisterRequest, request: Request) -> dict:
    try:
        user = register(body.email, body.password)
    except DuplicateAccountError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except RegistrationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me", response_model=SessionUser)
def auth_me(user: SessionUser = Depends(require_user)) -> SessionUser:
    return user


# ── User endpoints ───────────────────────────────────────────────────────


@app.get("/favorites", response_model=list[FavoritePlace])
def favorites(user: SessionUser = Depends(require_user)) -> list[FavoritePlace]:
    return list_favorites(user.email)


@app.post("/favorites", response_model=FavoritePlace, status_code=201)
def save_favorite(
    body: FavoriteRequest,
    user: SessionUser = Depends(require_user),
) -> FavoritePlace:
    return add_favorite(user.email, _location_or_404(body.place_id))


@app.delete("/favorites/{place_id}")
def unsave_favorite(place_id: str, user: SessionUser = Depends(require_user)) -> dict:
    if not remove_favorite(user.email, place_id):
        raise HTTPException(status_code=404, detail="Place is not in your favorites")
    return {"status": "removed"}


@app.get("/reviews", response_model=list[Review])
def reviews(user: SessionUser = Depends(require_user)) -> list[Review]:
    return list_reviews(user.email)


@app.post("/reviews", response_model=Review, status_code=201)
def submit_review(body: ReviewRequest, user: SessionUser = Depends(require_user)) -> Review:
    location = _location_or_404(body.place_id)
    return add_review(user.email, location, body.rating, body.review_text)


@app.delete("/reviews/{review_id}")
def remove_review(review_id: str, user: SessionUser = Depends(require_user)) -> dict:
    if not delete_review(user.email, review_id):
        raise HTTPException(status_code=404, detail="Review not found")
    return {"status": "deleted"}


@app.get("/searches", response_model=list[RecentSearch])
def searches(user: SessionUser = Depends(require_user)) -> list[RecentSearch]:
    return list_searches(user.email)


@app.delete("/searches/{search_id}")
def remove_search(search_id: str, user: SessionUser = Depends(require_user)) -> dict:
    if not delete_search(user.email, search_id):
        raise HTTPException(status_code=404, detail="Search not found")
    return {"status": "deleted"}


@app.delete("/searches")
def remove_all_searches(user: SessionUser = Depends(require_user)) -> dict:
    return {"status": "cleared", "deleted": clear_searches(user.email)}


@app.get("/settings", response_model=UserSettings)
def settings(user: SessionUser = Depends(require_user)) -> UserSettings:
    return get_settings(user.email)


@app.patch("/settings", response_model=UserSettings)
def change_settings(
    body: SettingsUpdate,
    user: SessionUser = Depends(require_user),
) -> UserSettings:
    return update_settings(user.email, body)


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics(user: SessionUser = Depends(require_admin)) -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats(user: SessionUser = Depends(require_admin)) -> dict:
    return get_cache_stats()
