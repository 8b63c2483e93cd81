from __future__ import annotations

from fastapi import HTTPException, Request
from pydantic import ValidationError

from .models import SessionUser


def get_current_user(request: Request) -> SessionUser | None:
    """Return the signed-in user, or ``None`` for guests and unreadable sessions."""
    stored = request.session.get("user")
    if not stored:
        return None
    try:
        return SessionUser.model_validate(stored)
    except ValidationError:
        request.session.pop("user", None)
        return None


def require_user(request: Request) -> SessionUser:
    user = get_current_user(request)
    if user is None:
        raise HTTPException(status_code=401, detail="Please sign in first")
    return user


def require_admin(request: Request) -> SessionUser:
    user = require_user(request)
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
