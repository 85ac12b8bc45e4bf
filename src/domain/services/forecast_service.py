"""
Domain service - sales forecast.

Gates, orchestrates and shapes a revenue forecast from already-fetched sale
records. No network or storage access happens here.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from src.domain.entities.errors import TrendOverflowError
from src.domain.entities.forecast import ForecastOutcome, ForecastResult, InsufficientData
from src.domain.entities.sales import SaleRecord
from src.domain.services import trend_model
from src.domain.services.aggregator import DEFAULT_TIMEZONE, aggregate_daily

logger = structlog.get_logger(__name__)

DEFAULT_MIN_DAYS = 7
DEFAULT_HORIZON_DAYS = 7
INSUFFICIENT_DATA_ERROR = "Insufficient data"


def get_forecast(
    sale_records: Iterable[SaleRecord],
    min_days: int = DEFAULT_MIN_DAYS,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    tz: str = DEFAULT_TIMEZONE,
) -> ForecastOutcome:
    """
    Forecast daily revenue for the next ``horizon_days`` days.

    Args:
        sale_records: Completed sales, already scoped to the caller
        min_days: Minimum number of distinct days with sales required to fit
        horizon_days: Number of consecutive days to predict
        tz: Reference timezone used to assign sales to days

    Returns:
        ForecastResult, or InsufficientData when fewer than ``min_days``
        distinct days have sales or the totals are too large for a finite
        fit. The gate never drops below the two points a line needs.

    Raises:
        ValueError: When horizon_days is lower than 1
    """
    if horizon_days < 1:
        raise ValueError("horizon_days must be at least 1")

    required_days = max(min_days, trend_model.MIN_FIT_POINTS)
    daily = aggregate_daily(sale_records, tz=tz)

    if len(daily) < required_days:
        logger.info(
            "forecast.insufficient_data",
            days_analyzed=len(daily),
            required_days=required_days,
        )
        return InsufficientData(
            message=(
                f"At least {required_days} days with sales are needed to "
                f"forecast revenue; found {len(daily)}."
            ),
            days_analyzed=len(daily),
            min_days=required_days,
        )

    try:
        model = trend_model.fit(daily)
        predictions = trend_model.predict(model, daily[-1].date, horizon_days)
    except TrendOverflowError as exc:
        logger.warning("forecast.overflow", days_analyzed=len(daily))
        return InsufficientData(
            message=exc.message,
            days_analyzed=len(daily),
            min_days=required_days,
        )

    logger.info(
        "forecast.generated",
        days_analyzed=len(daily),
        horizon_days=horizon_days,
        accuracy=round(model.accuracy_percentage, 2),
    )

    return ForecastResult(
        historical=tuple(daily),
        predictions=tuple(predictions),
        model=model,
        data_points=sum(point.sale_count for point in daily),
    )
