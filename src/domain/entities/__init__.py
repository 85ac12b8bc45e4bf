"""
Domain Entities Package

This package contains the core domain entities: sales data, the daily
revenue series, forecasts, insights and reports.
"""

from .errors import (
    DataBackendError,
    DomainError,
    InsufficientTrendDataError,
    TrendOverflowError,
)
from .forecast import (
    ConfidenceInterval,
    ForecastOutcome,
    ForecastResult,
    InsufficientData,
    PredictionPoint,
    TrendModel,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .insight import Insight, InsightCategory, InsightPriority
from .report import (
    EmptyReport,
    MetricUnit,
    ReportOutcome,
    ReportSummary,
    ReportType,
    SummaryMetric,
)
from .sales import Customer, Product, Purchase, SaleRecord, SaleStatus
from .time_series import DailyPoint

__all__ = [
    "SaleRecord",
    "SaleStatus",
    "Product",
    "Customer",
    "Purchase",
    "DailyPoint",
    "ConfidenceInterval",
    "PredictionPoint",
    "TrendModel",
    "ForecastResult",
    "InsufficientData",
    "ForecastOutcome",
    "Insight",
    "InsightPriority",
    "InsightCategory",
    "ReportType",
    "MetricUnit",
    "SummaryMetric",
    "ReportSummary",
    "EmptyReport",
    "ReportOutcome",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "InsufficientTrendDataError",
    "TrendOverflowError",
    "DataBackendError",
]
