"""
Supabase Sale Repository - Infrastructure Layer

This module implements the SaleRepository interface on top of the
``sales`` table of the hosted backend.
"""

from typing import Any, Dict, List, Optional

import structlog

from src.domain.entities.sales import SaleRecord, SaleStatus
from src.domain.repositories.sale_repository import ISaleRepository
from src.infrastructure.gateways.supabase_gateway import SupabaseGateway
from src.infrastructure.repositories.row_mapping import as_float, as_int, as_str

logger = structlog.get_logger(__name__)


class SaleRepository(ISaleRepository):
    """Supabase implementation of the SaleRepository."""

    TABLE_NAME = "sales"

    def __init__(self, gateway: SupabaseGateway):
        self.gateway = gateway

    def _from_row(self, row: Dict[str, Any]) -> SaleRecord:
        """Convert a ``sales`` row to a SaleRecord.

        ``total`` and ``created_at`` are passed through untouched; bad values
        are dropped later during aggregation.
        """
        try:
            status = SaleStatus(row.get("status") or SaleStatus.COMPLETED.value)
        except ValueError:
            logger.warning(
                "sale.unknown_status", sale_id=row.get("id"), status=row.get("status")
            )
            status = SaleStatus.PENDING

        return SaleRecord(
            id=str(row.get("id", "")),
            product_id=as_str(row.get("product_id")),
            customer_id=as_str(row.get("customer_id")),
            quantity=as_int(row.get("quantity")),
            unit_price=as_float(row.get("unit_price")),
            total=row.get("total"),
            status=status,
            created_at=row.get("created_at"),
        )

    async def find_all(
        self,
        status: Optional[SaleStatus] = None,
        access_token: Optional[str] = None,
    ) -> List[SaleRecord]:
        filters = {"status": status.value} if status else None
        rows = await self.gateway.select(
            self.TABLE_NAME,
            filters=filters,
            order="created_at.asc",
            access_token=access_token,
        )
        return [self._from_row(row) for row in rows]
