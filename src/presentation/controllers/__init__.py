"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error handling, and mapping between API DTOs
and application layer use cases.
"""

from .dashboard_controller import router as dashboard_router
from .forecast_controller import router as forecast_router
from .insights_controller import router as insights_router
from .reports_controller import router as reports_router
from .system_controller import router as system_router

__all__ = [
    "dashboard_router",
    "forecast_router",
    "insights_router",
    "reports_router",
    "system_router",
]
