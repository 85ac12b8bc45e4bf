"""DTOs for the dashboard snapshot."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from src.application.dtos.forecast_dto import ForecastOutcomeDTO
from src.application.dtos.insight_dto import InsightDTO


class DashboardMetricsDTO(BaseModel):
    total_revenue: float = Field(ge=0, description="Revenue of all completed sales")
    sales_count: int = Field(ge=0)
    customers_count: int = Field(ge=0)
    products_count: int = Field(ge=0)


class ProductRevenueDTO(BaseModel):
    name: str
    revenue: float = Field(ge=0)


class CategoryRevenueDTO(BaseModel):
    category: str
    revenue: float = Field(ge=0)


class DashboardResponseDTO(BaseModel):
    """Everything the dashboard page renders in one payload."""

    metrics: DashboardMetricsDTO
    top_products: List[ProductRevenueDTO] = Field(default_factory=list)
    category_revenue: List[CategoryRevenueDTO] = Field(default_factory=list)
    forecast: ForecastOutcomeDTO
    insights: List[InsightDTO] = Field(default_factory=list)
