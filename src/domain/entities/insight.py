"""Insight cards shown on the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InsightPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class InsightCategory(str, Enum):
    """Topic tag of an insight."""

    SALES = "sales"
    INVENTORY = "inventory"
    ONBOARDING = "onboarding"


@dataclass(frozen=True, slots=True)
class Insight:
    """A rendered, human-readable insight with a navigation target."""

    id: str
    priority: InsightPriority
    category: InsightCategory
    title: str
    description: str
    link: str
