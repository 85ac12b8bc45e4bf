"""
Domain service - linear trend model.

Fits an ordinary least-squares line to a daily revenue series and
extrapolates it forward with a confidence band.

The i-th point of the series is placed at x = i regardless of calendar gaps
between days with sales; predictions continue at x = n, n + 1, ... and are
dated on consecutive calendar days after the last observed day.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import List, Sequence

import numpy as np
import structlog

from src.domain.entities.errors import InsufficientTrendDataError, TrendOverflowError
from src.domain.entities.forecast import ConfidenceInterval, PredictionPoint, TrendModel
from src.domain.entities.time_series import DailyPoint

logger = structlog.get_logger(__name__)

MIN_FIT_POINTS = 2
# Two-sided 95% normal quantile.
CONFIDENCE_Z = 1.96


def _accuracy_percentage(rmse: float, mean_revenue: float) -> float:
    if mean_revenue <= 0:
        return 0.0
    return float(np.clip(100.0 * (1.0 - rmse / mean_revenue), 0.0, 100.0))


def fit(points: Sequence[DailyPoint]) -> TrendModel:
    """
    Fit revenue = slope * x + intercept over the series.

    Args:
        points: Daily points sorted ascending by date

    Returns:
        The fitted TrendModel with RMSE and accuracy percentage

    Raises:
        InsufficientTrendDataError: When fewer than two points are given
        TrendOverflowError: When the sums overflow to a non-finite fit
    """
    n = len(points)
    if n < MIN_FIT_POINTS:
        raise InsufficientTrendDataError(n)

    x = np.arange(n, dtype=float)
    y = np.array([point.total for point in points], dtype=float)

    with np.errstate(over="ignore", invalid="ignore"):
        sum_x = x.sum()
        sum_y = y.sum()
        sum_xy = (x * y).sum()
        sum_xx = (x * x).sum()

        # x holds n distinct integers, so the denominator is never zero here.
        slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x**2)
        intercept = (sum_y - slope * sum_x) / n

        residuals = (slope * x + intercept) - y
        rmse = float(np.sqrt(np.mean(residuals**2)))
        mean_revenue = float(y.mean())

    if not np.isfinite([slope, intercept, rmse, mean_revenue]).all():
        raise TrendOverflowError(n)

    model = TrendModel(
        slope=float(slope),
        intercept=float(intercept),
        point_count=n,
        rmse=rmse,
        accuracy_percentage=_accuracy_percentage(rmse, mean_revenue),
    )

    logger.debug(
        "trend_model.fitted",
        points=n,
        slope=model.slope,
        intercept=model.intercept,
        rmse=model.rmse,
        accuracy=model.accuracy_percentage,
    )
    return model


def predict(
    model: TrendModel, last_date: date, horizon_days: int
) -> List[PredictionPoint]:
    """
    Extrapolate the fitted line ``horizon_days`` days past ``last_date``.

    Predicted values and both interval bounds are floored at zero.

    Raises:
        TrendOverflowError: When an extrapolated value is not finite
    """
    if horizon_days < 1:
        raise ValueError("horizon_days must be at least 1")

    margin = CONFIDENCE_Z * model.rmse
    predictions: List[PredictionPoint] = []

    for step in range(horizon_days):
        predicted = max(0.0, model.value_at(model.point_count + step))
        predictions.append(
            PredictionPoint(
                date=last_date + timedelta(days=step + 1),
                predicted_value=predicted,
                confidence_interval=ConfidenceInterval(
                    lower=max(0.0, predicted - margin),
                    upper=max(0.0, predicted + margin),
                ),
            )
        )

    if not all(math.isfinite(p.confidence_interval.upper) for p in predictions):
        raise TrendOverflowError(model.point_count)

    return predictions
