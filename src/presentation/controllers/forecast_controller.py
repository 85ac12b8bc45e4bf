"""
Presentation Layer - Forecast Controller

Exposes the sales revenue forecast.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from src.application.dtos.forecast_dto import ForecastOutcomeDTO
from src.application.use_cases.forecast_use_cases import GetSalesForecastUseCase
from src.domain.entities.errors import DataBackendError
from src.presentation.controllers.auth import access_token

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/forecast", tags=["Forecast"])


@router.get(
    "/sales",
    response_model=ForecastOutcomeDTO,
    summary="Forecast daily revenue",
    description="""
    Aggregate completed sales into daily revenue totals, fit a linear trend
    and project the next days with a 95% confidence band. When there are not
    enough days with sales, an `Insufficient data` body is returned instead.
    """,
)
@inject
async def get_sales_forecast(
    token: str = Depends(access_token),
    forecast_use_case: GetSalesForecastUseCase = Depends(
        Provide["get_sales_forecast_use_case"]
    ),
) -> ForecastOutcomeDTO:
    try:
        return await forecast_use_case.execute(access_token=token)
    except DataBackendError as exc:
        logger.warning(
            "forecast.data_backend_error",
            error=exc.message,
            status_code=exc.status_code,
        )
        raise HTTPException(status_code=502, detail=exc.message)
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error("forecast.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")
