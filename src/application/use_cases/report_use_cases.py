"""
Application Use Case - Reports

Fetches only the collections a report needs and hands them to the report
builder.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Dict, Optional

import structlog

from src.application.dtos.report_dto import ReportOutcomeDTO, report_outcome_to_dto
from src.domain.entities.report import EmptyReport, ReportType
from src.domain.entities.sales import SaleStatus
from src.domain.repositories.customer_repository import ICustomerRepository
from src.domain.repositories.product_repository import IProductRepository
from src.domain.repositories.purchase_repository import IPurchaseRepository
from src.domain.repositories.sale_repository import ISaleRepository
from src.domain.services.aggregator import DEFAULT_TIMEZONE
from src.domain.services.report_builder import build_report

logger = structlog.get_logger(__name__)

_REQUIRED_COLLECTIONS = {
    ReportType.SALES: ("sales", "products", "customers"),
    ReportType.INVENTORY: ("products",),
    ReportType.CUSTOMERS: ("customers",),
    ReportType.FINANCIAL: ("sales", "purchases"),
}


class GetReportUseCase:
    """Computes one of the dashboard's business reports."""

    def __init__(
        self,
        sale_repository: ISaleRepository,
        product_repository: IProductRepository,
        customer_repository: ICustomerRepository,
        purchase_repository: IPurchaseRepository,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> None:
        self.sale_repository = sale_repository
        self.product_repository = product_repository
        self.customer_repository = customer_repository
        self.purchase_repository = purchase_repository
        self.timezone = timezone

    def _fetch(self, collection: str, access_token: Optional[str]) -> Awaitable[Any]:
        if collection == "sales":
            return self.sale_repository.find_all(
                status=SaleStatus.COMPLETED, access_token=access_token
            )
        if collection == "products":
            return self.product_repository.find_all(access_token=access_token)
        if collection == "customers":
            return self.customer_repository.find_all(access_token=access_token)
        return self.purchase_repository.find_all(access_token=access_token)

    async def execute(
        self, report_type: ReportType, access_token: Optional[str] = None
    ) -> ReportOutcomeDTO:
        names = _REQUIRED_COLLECTIONS[report_type]
        results = await asyncio.gather(
            *(self._fetch(name, access_token) for name in names)
        )
        collections: Dict[str, Any] = dict(zip(names, results))

        outcome = build_report(report_type, tz=self.timezone, **collections)
        logger.info(
            "report.built",
            report_type=report_type.value,
            empty=isinstance(outcome, EmptyReport),
        )
        return report_outcome_to_dto(outcome)
