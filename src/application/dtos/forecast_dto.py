"""
Application DTOs - Forecast

Data Transfer Objects for the sales forecast response. A forecast request
answers with either ``ForecastResponseDTO`` or
``InsufficientDataResponseDTO``; both are successful responses.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Literal, Union

from pydantic import BaseModel, Field

from src.domain.entities.forecast import (
    ForecastOutcome,
    ForecastResult,
    InsufficientData,
    PredictionPoint,
)
from src.domain.entities.time_series import DailyPoint
from src.domain.services.forecast_service import INSUFFICIENT_DATA_ERROR

MODEL_TYPE = "linear_regression"


class HistoricalPointDTO(BaseModel):
    """Observed revenue for one day."""

    date: dt.date
    total: float = Field(ge=0)

    @classmethod
    def from_domain(cls, point: DailyPoint) -> "HistoricalPointDTO":
        return cls(date=point.date, total=point.total)


class ConfidenceIntervalDTO(BaseModel):
    lower: float = Field(ge=0)
    upper: float = Field(ge=0)


class PredictionPointDTO(BaseModel):
    """Predicted revenue for one future day."""

    date: dt.date
    predicted_value: float = Field(ge=0)
    confidence_interval: ConfidenceIntervalDTO

    @classmethod
    def from_domain(cls, point: PredictionPoint) -> "PredictionPointDTO":
        return cls(
            date=point.date,
            predicted_value=point.predicted_value,
            confidence_interval=ConfidenceIntervalDTO(
                lower=point.confidence_interval.lower,
                upper=point.confidence_interval.upper,
            ),
        )


class ModelInfoDTO(BaseModel):
    """Summary of the fitted trend model."""

    type: str = Field(default=MODEL_TYPE, description="Model family")
    accuracy_percentage: float = Field(
        ge=0,
        le=100,
        description=(
            "Heuristic fit quality: 100 * (1 - RMSE / mean revenue), clamped "
            "to [0, 100]. Not a statistical confidence level."
        ),
    )
    rmse: float = Field(ge=0, description="Root-mean-square residual error")
    slope: float
    intercept: float
    data_points: int = Field(ge=0, description="Sale records aggregated")
    days_analyzed: int = Field(ge=0, description="Distinct days with sales")


class ForecastResponseDTO(BaseModel):
    """DTO returned when a forecast could be produced."""

    predictions: List[PredictionPointDTO]
    model_info: ModelInfoDTO
    historical_data: List[HistoricalPointDTO]

    @classmethod
    def from_domain(cls, result: ForecastResult) -> "ForecastResponseDTO":
        return cls(
            predictions=[PredictionPointDTO.from_domain(p) for p in result.predictions],
            model_info=ModelInfoDTO(
                accuracy_percentage=result.model.accuracy_percentage,
                rmse=result.model.rmse,
                slope=result.model.slope,
                intercept=result.model.intercept,
                data_points=result.data_points,
                days_analyzed=result.days_analyzed,
            ),
            historical_data=[
                HistoricalPointDTO.from_domain(p) for p in result.historical
            ],
        )

    model_config = {
        "protected_namespaces": (),
        "json_schema_extra": {
            "example": {
                "predictions": [
                    {
                        "date": "2024-09-09",
                        "predicted_value": 170.0,
                        "confidence_interval": {"lower": 165.2, "upper": 174.8},
                    }
                ],
                "model_info": {
                    "type": MODEL_TYPE,
                    "accuracy_percentage": 98.1,
                    "rmse": 2.45,
                    "slope": 10.0,
                    "intercept": 100.0,
                    "data_points": 42,
                    "days_analyzed": 7,
                },
                "historical_data": [{"date": "2024-09-08", "total": 160.0}],
            }
        }
    }


class InsufficientDataResponseDTO(BaseModel):
    """DTO returned when there is not enough history to forecast."""

    error: Literal["Insufficient data"] = INSUFFICIENT_DATA_ERROR
    message: str
    days_analyzed: int = Field(ge=0)

    @classmethod
    def from_domain(cls, signal: InsufficientData) -> "InsufficientDataResponseDTO":
        return cls(message=signal.message, days_analyzed=signal.days_analyzed)


ForecastOutcomeDTO = Union[ForecastResponseDTO, InsufficientDataResponseDTO]


def forecast_outcome_to_dto(outcome: ForecastOutcome) -> ForecastOutcomeDTO:
    if isinstance(outcome, InsufficientData):
        return InsufficientDataResponseDTO.from_domain(outcome)
    return ForecastResponseDTO.from_domain(outcome)
