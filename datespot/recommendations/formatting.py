from __future__ import annotations

from typing import Any

CURRENCY_SYMBOL = "₦"

_BUDGET_RANGES: dict[str, str] = {
    "budget": "₦500 - ₦3,000",
    "moderate": "₦3,000 - ₦10,000",
    "premium": "₦10,000+",
}


def format_currency(amount: float | int) -> str:
    """Render an amount as naira with en-US grouping, e.g. ``8000 -> "₦8,000"``."""
    value = float(amount)
    if value.is_integer():
        return f"{CURRENCY_SYMBOL}{int(value):,}"
    # Up to three fraction digits, trailing zeros dropped
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{CURRENCY_SYMBOL}{text}"


def budget_range_label(tier: Any) -> str:
    """Return the human-readable spend range for a budget tier, or ``""``."""
    key = getattr(tier, "value", tier)
    if not isinstance(key, str):
        return ""
    return _BUDGET_RANGES.get(key, "")
