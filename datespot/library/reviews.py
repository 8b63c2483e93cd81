from __future__ import annotations

import time
import uuid

from ..recommendations.models import LocationRecord
from .models import Review

# author email -> reviews in submission order
_reviews: dict[str, list[Review]] = {}


def add_review(
    author: str,
    location: LocationRecord,
    rating: int,
    review_text: str | None = None,
) -> Review:
    text = (review_text or "").strip() or None
    review = Review(
        id=uuid.uuid4().hex,
        place_id=location.id,
        place_name=location.name,
        rating=rating,
        review_text=text,
        created_at=time.time(),
    )
    _reviews.setdefault(author, []).append(review)
    return review


def list_reviews(author: str) -> list[Review]:
    return list(reversed(_reviews.get(author, [])))


def delete_review(author: str, review_id: str) -> bool:
    """Delete one of *author*'s reviews. Other users' reviews are never touched."""
    own = _reviews.get(author, [])
    kept = [r for r in own if r.id != review_id]
    _reviews[author] = kept
    return len(kept) != len(own)


def get_reviews_for_place(place_id: str) -> list[Review]:
    """Every author's reviews of one place, newest first."""
    found = [r for own in _reviews.values() for r in own if r.place_id == place_id]
    return sorted(found, key=lambda r: r.created_at, reverse=True)


def get_all_reviews() -> list[Review]:
    return [r for own in _reviews.values() for r in own]


def clear_reviews() -> None:
    _reviews.clear()
