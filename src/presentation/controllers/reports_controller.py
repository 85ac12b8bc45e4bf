"""
Presentation Layer - Reports Controller

Exposes the sales, inventory, customers and financial reports.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from src.application.dtos.report_dto import ReportOutcomeDTO
from src.application.use_cases.report_use_cases import GetReportUseCase
from src.domain.entities.errors import DataBackendError
from src.domain.entities.report import ReportType
from src.presentation.controllers.auth import access_token

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get(
    "/{report_type}",
    response_model=ReportOutcomeDTO,
    summary="Build a business report",
)
@inject
async def get_report(
    report_type: ReportType,
    token: str = Depends(access_token),
    report_use_case: GetReportUseCase = Depends(
        Provide["get_report_use_case"]
    ),
) -> ReportOutcomeDTO:
    try:
        return await report_use_case.execute(report_type, access_token=token)
    except DataBackendError as exc:
        logger.warning(
            "report.data_backend_error",
            report_type=report_type.value,
            error=exc.message,
            status_code=exc.status_code,
        )
        raise HTTPException(status_code=502, detail=exc.message)
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error(
            "report.unexpected_error",
            report_type=report_type.value,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(status_code=500, detail="Internal server error")
