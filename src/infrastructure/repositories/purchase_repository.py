"""Supabase Purchase Repository - Infrastructure Layer."""

from typing import Any, Dict, List, Optional

from src.domain.entities.sales import Purchase
from src.domain.repositories.purchase_repository import IPurchaseRepository
from src.infrastructure.gateways.supabase_gateway import SupabaseGateway
from src.infrastructure.repositories.row_mapping import as_float, as_int, as_str


class PurchaseRepository(IPurchaseRepository):
    """Supabase implementation of the PurchaseRepository."""

    TABLE_NAME = "purchases"

    def __init__(self, gateway: SupabaseGateway):
        self.gateway = gateway

    def _from_row(self, row: Dict[str, Any]) -> Purchase:
        return Purchase(
            id=str(row.get("id", "")),
            product_id=as_str(row.get("product_id")),
            quantity=as_int(row.get("quantity")),
            total=as_float(row.get("total")),
            created_at=row.get("created_at"),
        )

    async def find_all(self, access_token: Optional[str] = None) -> List[Purchase]:
        rows = await self.gateway.select(
            self.TABLE_NAME, order="created_at.asc", access_token=access_token
        )
        return [self._from_row(row) for row in rows]
