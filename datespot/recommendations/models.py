from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Budget(str, Enum):
    budget = "budget"
    moderate = "moderate"
    premium = "premium"


class Style(str, Enum):
    romantic = "romantic"
    adventure = "adventure"
    cultural = "cultural"
    relaxing = "relaxing"
    food = "food"
    outdoor = "outdoor"


class MatchTier(str, Enum):
    exact = "exact"
    budget_relaxed = "budget_relaxed"
    style_only = "style_only"


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class LocationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    category: Style
    price_range: Budget
    location: str = Field(..., description="Free-text area name")
    estimated_cost: float = Field(..., ge=0.0)
    duration: str = ""
    best_time_to_visit: str = ""
    tags: tuple[str, ...] = ()
    coordinates: Coordinates | None = None
    image_url: str | None = None


class Area(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""


class PreferenceRecord(BaseModel):
    budget: Budget
    style: Style
    location: str = Field(
        default="any", description='Area name, or "any" for no location filter'
    )
    group_size: int = Field(default=2, ge=1, le=50)


class RecommendationItem(BaseModel):
    location: LocationRecord
    cost_display: str
    highlight_tags: list[str] = Field(default_factory=list)
    is_favorite: bool = False


class RecommendationResponse(BaseModel):
    recommendations: list[RecommendationItem]
    tier: MatchTier
    total_matches: int
    budget_label: str
