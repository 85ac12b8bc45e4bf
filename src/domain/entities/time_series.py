"""Domain entities for the daily revenue series."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class DailyPoint:
    """Revenue aggregated over one calendar day."""

    date: date
    total: float
    sale_count: int = 0
