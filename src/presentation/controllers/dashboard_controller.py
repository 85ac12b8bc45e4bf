"""
Presentation Layer - Dashboard Controller
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from src.application.dtos.dashboard_dto import DashboardResponseDTO
from src.application.use_cases.dashboard_use_cases import GetDashboardUseCase
from src.domain.entities.errors import DataBackendError
from src.presentation.controllers.auth import access_token

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    response_model=DashboardResponseDTO,
    summary="Dashboard snapshot",
    description="""
    Headline metrics, top products by revenue, revenue per category, the
    revenue forecast and the insight cards in a single response.
    """,
)
@inject
async def get_dashboard(
    token: str = Depends(access_token),
    dashboard_use_case: GetDashboardUseCase = Depends(
        Provide["get_dashboard_use_case"]
    ),
) -> DashboardResponseDTO:
    try:
        return await dashboard_use_case.execute(access_token=token)
    except DataBackendError as exc:
        logger.warning(
            "dashboard.data_backend_error",
            error=exc.message,
            status_code=exc.status_code,
        )
        raise HTTPException(status_code=502, detail=exc.message)
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error("dashboard.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")
