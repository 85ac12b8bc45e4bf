"""
Application Use Case - Insights

Builds the ordered insight cards from the current products, completed sales
and the revenue forecast.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

import structlog

from src.application.dtos.insight_dto import InsightDTO
from src.application.models import ForecastOptions
from src.application.use_cases.forecast_use_cases import run_forecast
from src.domain.entities.sales import SaleStatus
from src.domain.repositories.product_repository import IProductRepository
from src.domain.repositories.sale_repository import ISaleRepository
from src.domain.services.insight_generator import InsightGenerator, InsightSnapshot

logger = structlog.get_logger(__name__)


class GetInsightsUseCase:
    """Evaluates the insight rules against freshly fetched data."""

    def __init__(
        self,
        sale_repository: ISaleRepository,
        product_repository: IProductRepository,
        insight_generator: Optional[InsightGenerator] = None,
        forecast_options: Optional[ForecastOptions] = None,
    ) -> None:
        self.sale_repository = sale_repository
        self.product_repository = product_repository
        self.insight_generator = insight_generator or InsightGenerator()
        self.forecast_options = forecast_options or ForecastOptions()

    async def execute(self, access_token: Optional[str] = None) -> List[InsightDTO]:
        sales, products = await asyncio.gather(
            self.sale_repository.find_all(
                status=SaleStatus.COMPLETED, access_token=access_token
            ),
            self.product_repository.find_all(access_token=access_token),
        )

        snapshot = InsightSnapshot(
            products=products,
            sales=sales,
            forecast=run_forecast(sales, self.forecast_options),
        )
        insights = self.insight_generator.generate(snapshot)

        logger.info("insights.request", count=len(insights))
        return [InsightDTO.from_domain(insight) for insight in insights]
