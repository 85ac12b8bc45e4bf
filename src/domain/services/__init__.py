"""
Domain Services Package

Pure, synchronous computations over domain entities: daily aggregation,
the linear trend model, forecasting, insight rules and reports.
"""

from . import aggregator, forecast_service, insight_generator, report_builder, trend_model

__all__ = [
    "aggregator",
    "trend_model",
    "forecast_service",
    "insight_generator",
    "report_builder",
]
