from __future__ import annotations

import time
import uuid

from ..recommendations.models import PreferenceRecord
from .models import RecentSearch

MAX_RECENT_SEARCHES = 20

_searches: dict[str, list[RecentSearch]] = {}


def record_search(
    owner: str,
    preferences: PreferenceRecord,
    result_ids: list[str],
) -> RecentSearch:
    search = RecentSearch(
        id=uuid.uuid4().hex,
        search_query=preferences.model_copy(),
        result_ids=list(result_ids),
        created_at=time.time(),
    )
    own = _searches.setdefault(owner, [])
    own.append(search)
    del own[:-MAX_RECENT_SEARCHES]
    return search


def list_searches(owner: str, limit: int = MAX_RECENT_SEARCHES) -> list[RecentSearch]:
    """Newest first, at most *limit* entries."""
    return list(reversed(_searches.get(owner, [])))[:limit]


def delete_search(owner: str, search_id: str) -> bool:
    own = _searches.get(owner, [])
    kept = [s for s in own if s.id != search_id]
    _searches[owner] = kept
    return len(kept) != len(own)


def clear_searches(owner: str) -> int:
    """Remove every saved search for *owner* and return how many were dropped."""
    return len(_searches.pop(owner, []))


def clear_all_searches() -> None:
    _searches.clear()
