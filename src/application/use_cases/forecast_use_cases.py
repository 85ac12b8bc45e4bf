"""
Application Use Case - Sales Forecast

Fetches the caller's completed sales and runs the forecast service over
them. An insufficient-data outcome is returned as a regular response.
"""

from __future__ import annotations

from typing import Optional, Sequence

import structlog

from src.application.dtos.forecast_dto import ForecastOutcomeDTO, forecast_outcome_to_dto
from src.application.models import ForecastOptions
from src.domain.entities.forecast import ForecastOutcome
from src.domain.entities.sales import SaleRecord, SaleStatus
from src.domain.repositories.sale_repository import ISaleRepository
from src.domain.services.forecast_service import get_forecast

logger = structlog.get_logger(__name__)


def run_forecast(sales: Sequence[SaleRecord], options: ForecastOptions) -> ForecastOutcome:
    return get_forecast(
        sales,
        min_days=options.min_days,
        horizon_days=options.horizon_days,
        tz=options.timezone,
    )


class GetSalesForecastUseCase:
    """Produces the revenue forecast for the caller's sales history."""

    def __init__(
        self,
        sale_repository: ISaleRepository,
        options: Optional[ForecastOptions] = None,
    ) -> None:
        self.sale_repository = sale_repository
        self.options = options or ForecastOptions()

    async def execute(self, access_token: Optional[str] = None) -> ForecastOutcomeDTO:
        sales = await self.sale_repository.find_all(
            status=SaleStatus.COMPLETED, access_token=access_token
        )
        logger.info("forecast.request", sales=len(sales))

        outcome = run_forecast(sales, self.options)
        return forecast_outcome_to_dto(outcome)
