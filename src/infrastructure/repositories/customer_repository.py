"""Supabase Customer Repository - Infrastructure Layer."""

from typing import Any, Dict, List, Optional

from src.domain.entities.sales import Customer
from src.domain.repositories.customer_repository import ICustomerRepository
from src.infrastructure.gateways.supabase_gateway import SupabaseGateway
from src.infrastructure.repositories.row_mapping import as_float, as_str


class CustomerRepository(ICustomerRepository):
    """Supabase implementation of the CustomerRepository."""

    TABLE_NAME = "customers"

    def __init__(self, gateway: SupabaseGateway):
        self.gateway = gateway

    def _from_row(self, row: Dict[str, Any]) -> Customer:
        return Customer(
            id=str(row.get("id", "")),
            name=row.get("name") or "",
            email=as_str(row.get("email")),
            phone=as_str(row.get("phone")),
            total_purchases=as_float(row.get("total_purchases")),
        )

    async def find_all(self, access_token: Optional[str] = None) -> List[Customer]:
        rows = await self.gateway.select(
            self.TABLE_NAME, order="name.asc", access_token=access_token
        )
        return [self._from_row(row) for row in rows]
