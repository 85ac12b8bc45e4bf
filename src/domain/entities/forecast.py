"""
Domain entities for revenue forecasts.

A forecast request ends in one of two outcomes: a ``ForecastResult`` when
there is enough history to fit the trend, or an ``InsufficientData`` signal
when there is not. Callers branch on the type; neither outcome is an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple, Union

from src.domain.entities.time_series import DailyPoint


@dataclass(frozen=True, slots=True)
class ConfidenceInterval:
    lower: float
    upper: float


@dataclass(frozen=True, slots=True)
class PredictionPoint:
    """Predicted revenue for one future day."""

    date: date
    predicted_value: float
    confidence_interval: ConfidenceInterval


@dataclass(frozen=True, slots=True)
class TrendModel:
    """
    Least-squares line fitted over a daily revenue series.

    ``accuracy_percentage`` is a fit-quality heuristic derived from the RMSE
    relative to the mean observed revenue. It is not R² and carries no
    statistical guarantee.
    """

    slope: float
    intercept: float
    point_count: int
    rmse: float
    accuracy_percentage: float

    def value_at(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True, slots=True)
class ForecastResult:
    """Historical series, forward predictions and the model that produced them."""

    historical: Tuple[DailyPoint, ...]
    predictions: Tuple[PredictionPoint, ...]
    model: TrendModel
    data_points: int

    @property
    def days_analyzed(self) -> int:
        return len(self.historical)


@dataclass(frozen=True, slots=True)
class InsufficientData:
    """Not enough distinct days of sales to fit a reliable trend."""

    message: str
    days_analyzed: int
    min_days: int


ForecastOutcome = Union[ForecastResult, InsufficientData]
