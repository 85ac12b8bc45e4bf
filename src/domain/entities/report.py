"""
Domain entities for business reports.

The report builder computes the numbers and tables; rendering to PDF or
charts happens in the client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Union


class ReportType(str, Enum):
    SALES = "sales"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    FINANCIAL = "financial"


class MetricUnit(str, Enum):
    CURRENCY = "currency"
    COUNT = "count"


@dataclass(frozen=True, slots=True)
class SummaryMetric:
    label: str
    value: float
    unit: MetricUnit = MetricUnit.CURRENCY


@dataclass(frozen=True, slots=True)
class ReportSummary:
    """Headline metrics plus a table for one report."""

    report_type: ReportType
    title: str
    summary: List[SummaryMetric] = field(default_factory=list)
    columns: List[str] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class EmptyReport:
    """There is no data to build the requested report from."""

    report_type: ReportType
    message: str


ReportOutcome = Union[ReportSummary, EmptyReport]
