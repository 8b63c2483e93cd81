"""
Three-tier recommendation selection over the location catalog.

The first tier that yields anything wins:

1. exact          - price range, style and location all match
2. budget_relaxed - price range dropped
3. style_only     - only the style has to match

Results are ordered by estimated cost (most expensive first for premium
searches, cheapest first otherwise) and capped at ``MAX_RESULTS``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .models import Budget, LocationRecord, MatchTier, PreferenceRecord

MAX_RESULTS = 6
ANY_LOCATION = "any"


@dataclass(frozen=True)
class Selection:
    tier: MatchTier
    items: tuple[LocationRecord, ...]
    total_matches: int


def _location_matches(entry: LocationRecord, wanted: str | None) -> bool:
    if not wanted or wanted == ANY_LOCATION:
        return True
    return wanted.lower() in entry.location.lower()


def _filter(
    catalog: Iterable[LocationRecord],
    preferences: PreferenceRecord,
    *,
    match_budget: bool,
    match_location: bool,
) -> list[LocationRecord]:
    matches: list[LocationRecord] = []
    for entry in catalog:
        if entry.category != preferences.style:
            continue
        if match_budget and entry.price_range != preferences.budget:
            continue
        if match_location and not _location_matches(entry, preferences.location):
            continue
        matches.append(entry)
    return matches


def select_with_tier(
    preferences: PreferenceRecord,
    catalog: Sequence[LocationRecord],
    limit: int = MAX_RESULTS,
) -> Selection:
    """Run the relaxation ladder and report which tier produced the result."""
    tiers = (
        (MatchTier.exact, True, True),
        (MatchTier.budget_relaxed, False, True),
        (MatchTier.style_only, False, False),
    )

    tier = MatchTier.style_only
    matches: list[LocationRecord] = []
    for tier, match_budget, match_location in tiers:
        matches = _filter(
            catalog,
            preferences,
            match_budget=match_budget,
            match_location=match_location,
        )
        if matches:
            break

    # sorted() is stable in both directions, so equal costs keep catalog order
    descending = preferences.budget == Budget.premium
    ordered = sorted(matches, key=lambda e: e.estimated_cost, reverse=descending)

    return Selection(
        tier=tier,
        items=tuple(ordered[: max(limit, 0)]),
        total_matches=len(matches),
    )


def select_recommendations(
    preferences: PreferenceRecord,
    catalog: Sequence[LocationRecord],
    limit: int = MAX_RESULTS,
) -> list[LocationRecord]:
    """Return up to ``limit`` catalog entries matching ``preferences``.

    Never raises: unknown styles or an empty catalog give an empty list.
    """
    return list(select_with_tier(preferences, catalog, limit).items)
