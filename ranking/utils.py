"""Small shared helpers for ranking stages."""

import math
from datetime import datetime


def ratio(matched: int, total: int) -> float:
    """matched / total, 0 when total is 0 (never treated as a full match)."""
    if total == 0:
        return 0.0
    return matched / total


def round2(value: float) -> float:
    """Round half away from zero to 2 decimals."""
    return math.floor(abs(value) * 100 + 0.5) / 100 * (1 if value >= 0 else -1)


def rfc3339_now() -> str:
    """Local timestamp with offset, seconds precision."""
    return datetime.now().astimezone().isoformat(timespec="seconds")


def clean_skill_list(items) -> list[str]:
    """Lowercase, trim, drop empties and duplicates, sort."""
    return sorted({item.strip().lower() for item in items or [] if item and item.strip()})


def clean_list(items) -> list[str]:
    """Trim, drop empties and duplicates, sort. Case is preserved."""
    return sorted({item.strip() for item in items or [] if item and item.strip()})


def merge_unique(*lists) -> list[str]:
    """Union of trimmed, non-empty items across lists, sorted."""
    merged = set()
    for items in lists:
        merged.update(item.strip() for item in items or [] if item and item.strip())
    return sorted(merged)


def join_or_none(items: list[str]) -> str:
    """Comma-join, or the literal "None" when empty."""
    if not items:
        return "None"
    return ", ".join(items)
