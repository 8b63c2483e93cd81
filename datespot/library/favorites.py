from __future__ import annotations

import time
import uuid

from ..recommendations.models import LocationRecord
from .models import FavoritePlace

_favorites: dict[str, list[FavoritePlace]] = {}


def add_favorite(owner: str, location: LocationRecord) -> FavoritePlace:
    """Save *location* for *owner*. Saving the same place twice returns the existing entry."""
    saved = _favorites.setdefault(owner, [])
    for fav in saved:
        if fav.place_id == location.id:
            return fav

    favorite = FavoritePlace(
        id=uuid.uuid4().hex,
        place_id=location.id,
        place_name=location.name,
        place_description=location.description,
        place_category=location.category,
        place_location=location.location,
        place_image_url=location.image_url,
        created_at=time.time(),
    )
    saved.append(favorite)
    return favorite


def remove_favorite(owner: str, place_id: str) -> bool:
    saved = _favorites.get(owner, [])
    kept = [f for f in saved if f.place_id != place_id]
    _favorites[owner] = kept
    return len(kept) != len(saved)


def list_favorites(owner: str) -> list[FavoritePlace]:
    return list(reversed(_favorites.get(owner, [])))


def favorite_ids(owner: str) -> set[str]:
    return {f.place_id for f in _favorites.get(owner, [])}


def clear_favorites() -> None:
    _favorites.clear()
