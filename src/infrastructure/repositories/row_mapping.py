"""Helpers for turning loosely typed backend rows into entity fields."""

from typing import Any, Optional


def as_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def as_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return default
