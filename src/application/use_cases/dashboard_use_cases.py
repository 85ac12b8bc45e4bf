"""
Application Use Case - Dashboard

Fetches sales, products and customers concurrently, then assembles the
dashboard snapshot sequentially so the insight order never depends on which
fetch finished first.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from src.application.dtos.dashboard_dto import (
    CategoryRevenueDTO,
    DashboardMetricsDTO,
    DashboardResponseDTO,
    ProductRevenueDTO,
)
from src.application.dtos.forecast_dto import forecast_outcome_to_dto
from src.application.dtos.insight_dto import InsightDTO
from src.application.models import ForecastOptions
from src.application.use_cases.forecast_use_cases import run_forecast
from src.domain.entities.sales import SaleStatus
from src.domain.repositories.customer_repository import ICustomerRepository
from src.domain.repositories.product_repository import IProductRepository
from src.domain.repositories.sale_repository import ISaleRepository
from src.domain.services.aggregator import (
    revenue_by_category,
    top_products,
    total_revenue,
)
from src.domain.services.insight_generator import InsightGenerator, InsightSnapshot

logger = structlog.get_logger(__name__)


class GetDashboardUseCase:
    """Builds the dashboard payload: metrics, charts, forecast and insights."""

    def __init__(
        self,
        sale_repository: ISaleRepository,
        product_repository: IProductRepository,
        customer_repository: ICustomerRepository,
        insight_generator: Optional[InsightGenerator] = None,
        forecast_options: Optional[ForecastOptions] = None,
        top_products_limit: int = 5,
    ) -> None:
        self.sale_repository = sale_repository
        self.product_repository = product_repository
        self.customer_repository = customer_repository
        self.insight_generator = insight_generator or InsightGenerator()
        self.forecast_options = forecast_options or ForecastOptions()
        self.top_products_limit = top_products_limit

    async def execute(self, access_token: Optional[str] = None) -> DashboardResponseDTO:
        sales, products, customers = await asyncio.gather(
            self.sale_repository.find_all(
                status=SaleStatus.COMPLETED, access_token=access_token
            ),
            self.product_repository.find_all(access_token=access_token),
            self.customer_repository.find_all(access_token=access_token),
        )

        forecast = run_forecast(sales, self.forecast_options)
        insights = self.insight_generator.generate(
            InsightSnapshot(products=products, sales=sales, forecast=forecast)
        )

        logger.info(
            "dashboard.assembled",
            sales=len(sales),
            products=len(products),
            customers=len(customers),
            insights=len(insights),
        )

        return DashboardResponseDTO(
            metrics=DashboardMetricsDTO(
                total_revenue=total_revenue(sales),
                sales_count=len(sales),
                customers_count=len(customers),
                products_count=len(products),
            ),
            top_products=[
                ProductRevenueDTO(name=name, revenue=revenue)
                for name, revenue in top_products(
                    sales, products, limit=self.top_products_limit
                )
            ],
            category_revenue=[
                CategoryRevenueDTO(category=category, revenue=revenue)
                for category, revenue in revenue_by_category(sales, products).items()
            ],
            forecast=forecast_outcome_to_dto(forecast),
            insights=[InsightDTO.from_domain(insight) for insight in insights],
        )
