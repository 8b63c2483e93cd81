from __future__ import annotations

import time

from .models import SettingsUpdate, UserSettings

_settings: dict[str, UserSettings] = {}


def get_settings(owner: str) -> UserSettings:
    """Return *owner*'s settings, creating the defaults on first access."""
    current = _settings.get(owner)
    if current is None:
        current = UserSettings(updated_at=time.time())
        _settings[owner] = current
    return current


def update_settings(owner: str, changes: SettingsUpdate) -> UserSettings:
    current = get_settings(owner)
    patch = changes.model_dump(exclude_none=True)
    updated = current.model_copy(update={**patch, "updated_at": time.time()})
    _settings[owner] = updated
    return updated


def clear_settings() -> None:
    _settings.clear()
