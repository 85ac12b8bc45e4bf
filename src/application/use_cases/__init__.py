"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases fetch data through repositories and
hand it to the domain services.
"""

from .dashboard_use_cases import GetDashboardUseCase
from .forecast_use_cases import GetSalesForecastUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .insight_use_cases import GetInsightsUseCase
from .report_use_cases import GetReportUseCase

__all__ = [
    "GetSalesForecastUseCase",
    "GetInsightsUseCase",
    "GetDashboardUseCase",
    "GetReportUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
