from __future__ import annotations

import logging
from typing import Any

import bcrypt

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt only hashes the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72

_users: dict[str, dict[str, Any]] = {}


class RegistrationError(ValueError):
    """Raised when an account cannot be created."""


class DuplicateAccountError(RegistrationError):
    """Raised when the email is already registered."""


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _fits_bcrypt(plain: str) -> bool:
    return len(plain.encode()) <= MAX_PASSWORD_BYTES


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _seed_users() -> None:
    """Pre-seed demo accounts on import."""
    _users["user@datespot.app"] = {"password_hash": _hash_password("user123"), "role": "user"}
    _users["admin@datespot.app"] = {"password_hash": _hash_password("admin123"), "role": "admin"}


def register(email: str, password: str, role: str = "user") -> dict[str, Any]:
    """Create an account. Returns ``{email, role}``."""
    key = _normalize_email(email)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise RegistrationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if not _fits_bcrypt(password):
        raise RegistrationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
        )
    if key in _users:
        logger.warning("Registration rejected, %s already exists", key)
        raise DuplicateAccountError("An account with this email already exists")

    _users[key] = {"password_hash": _hash_password(password), "role": role}
    return {"email": key, "role": role}


def authenticate(email: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{email, role}`` or ``None``."""
    key = _normalize_email(email)
    record = _users.get(key)
    if record and _fits_bcrypt(password) and _verify_password(password, record["password_hash"]):
        return {"email": key, "role": record["role"]}
    logger.warning("Failed sign-in for %s", key)
    return None


def reset_users() -> None:
    """Drop every registered account and restore the demo accounts."""
    _users.clear()
    _seed_users()


_seed_users()
