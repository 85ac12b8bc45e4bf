"""
Presentation Layer - Insights Controller

Exposes the prioritized insight cards shown on the dashboard.
"""

from typing import List

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from src.application.dtos.insight_dto import InsightDTO
from src.application.use_cases.insight_use_cases import GetInsightsUseCase
from src.domain.entities.errors import DataBackendError
from src.presentation.controllers.auth import access_token

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/insights", tags=["Insights"])


@router.get(
    "",
    response_model=List[InsightDTO],
    summary="List business insights",
)
@inject
async def get_insights(
    token: str = Depends(access_token),
    insights_use_case: GetInsightsUseCase = Depends(
        Provide["get_insights_use_case"]
    ),
) -> List[InsightDTO]:
    try:
        return await insights_use_case.execute(access_token=token)
    except DataBackendError as exc:
        logger.warning(
            "insights.data_backend_error",
            error=exc.message,
            status_code=exc.status_code,
        )
        raise HTTPException(status_code=502, detail=exc.message)
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error("insights.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")
