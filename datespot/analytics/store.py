from __future__ import annotations

import time
from typing import Any

# Append-only within a process; readers get copies
_events: list[dict[str, Any]] = []


def record_event(event_type: str, data: dict[str, Any]) -> dict[str, Any]:
    event = {**data, "type": event_type, "timestamp": time.time()}
    _events.append(event)
    return event


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    return [dict(e) for e in _events if event_type is None or e["type"] == event_type]


def clear_events() -> None:
    _events.clear()
