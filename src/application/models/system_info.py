"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    data_backend_url: str
    forecast_min_days: int
    forecast_horizon_days: int
    forecast_timezone: str


@dataclass(frozen=True)
class ForecastOptions:
    """Forecast parameters handed to the forecasting use cases."""

    min_days: int = 7
    horizon_days: int = 7
    timezone: str = "UTC"
