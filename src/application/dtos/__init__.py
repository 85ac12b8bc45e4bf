"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .dashboard_dto import (
    CategoryRevenueDTO,
    DashboardMetricsDTO,
    DashboardResponseDTO,
    ProductRevenueDTO,
)
from .forecast_dto import (
    ConfidenceIntervalDTO,
    ForecastOutcomeDTO,
    ForecastResponseDTO,
    HistoricalPointDTO,
    InsufficientDataResponseDTO,
    ModelInfoDTO,
    PredictionPointDTO,
    forecast_outcome_to_dto,
)
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .insight_dto import InsightDTO
from .report_dto import (
    EmptyReportDTO,
    ReportOutcomeDTO,
    ReportSummaryDTO,
    SummaryMetricDTO,
    report_outcome_to_dto,
)

__all__ = [
    "HistoricalPointDTO",
    "ConfidenceIntervalDTO",
    "PredictionPointDTO",
    "ModelInfoDTO",
    "ForecastResponseDTO",
    "InsufficientDataResponseDTO",
    "ForecastOutcomeDTO",
    "forecast_outcome_to_dto",
    "InsightDTO",
    "DashboardMetricsDTO",
    "ProductRevenueDTO",
    "CategoryRevenueDTO",
    "DashboardResponseDTO",
    "SummaryMetricDTO",
    "ReportSummaryDTO",
    "EmptyReportDTO",
    "ReportOutcomeDTO",
    "report_outcome_to_dto",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
