from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..recommendations.models import Budget, PreferenceRecord, Style


class Theme(str, Enum):
    light = "light"
    dark = "dark"
    system = "system"


class FavoritePlace(BaseModel):
    id: str
    place_id: str
    place_name: str
    place_description: str = ""
    place_category: Style
    place_location: str
    place_image_url: str | None = None
    created_at: float


class FavoriteRequest(BaseModel):
    place_id: str = Field(..., min_length=1)


class Review(BaseModel):
    id: str
    place_id: str
    place_name: str
    rating: int = Field(..., ge=1, le=5)
    review_text: str | None = None
    created_at: float


class ReviewRequest(BaseModel):
    place_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    review_text: str | None = Field(default=None, max_length=2000)


class RecentSearch(BaseModel):
    id: str
    search_query: PreferenceRecord
    result_ids: list[str] = Field(default_factory=list)
    created_at: float


class UserSettings(BaseModel):
    theme: Theme = Theme.system
    notifications_enabled: bool = True
    location_sharing: bool = True
    preferred_budget: Budget = Budget.moderate
    updated_at: float


class SettingsUpdate(BaseModel):
    theme: Theme | None = None
    notifications_enabled: bool | None = None
    location_sharing: bool | None = None
    preferred_budget: Budget | None = None
