"""Supabase Product Repository - Infrastructure Layer."""

from typing import Any, Dict, List, Optional

from src.domain.entities.sales import Product
from src.domain.repositories.product_repository import IProductRepository
from src.infrastructure.gateways.supabase_gateway import SupabaseGateway
from src.infrastructure.repositories.row_mapping import as_float, as_int, as_str


class ProductRepository(IProductRepository):
    """Supabase implementation of the ProductRepository."""

    TABLE_NAME = "products"

    def __init__(self, gateway: SupabaseGateway):
        self.gateway = gateway

    def _from_row(self, row: Dict[str, Any]) -> Product:
        return Product(
            id=str(row.get("id", "")),
            name=row.get("name") or "",
            category=as_str(row.get("category")),
            stock=max(0, as_int(row.get("stock"))),
            min_stock=max(0, as_int(row.get("min_stock"))),
            price=as_float(row.get("price")),
            sku=as_str(row.get("sku")),
        )

    async def find_all(self, access_token: Optional[str] = None) -> List[Product]:
        rows = await self.gateway.select(
            self.TABLE_NAME, order="name.asc", access_token=access_token
        )
        return [self._from_row(row) for row in rows]
