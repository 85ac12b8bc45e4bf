"""
Domain Entities - Business Records

Read-only snapshots of the ERP records the engine works on. They are
produced by the repositories from backend rows and never written back.

Numeric fields keep whatever the backend sent: sale totals in particular
are validated during aggregation, where malformed records are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SaleStatus(str, Enum):
    """Lifecycle state of a sale."""

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class SaleRecord:
    """A single sale line: one product sold to one customer."""

    id: str
    product_id: Optional[str] = None
    customer_id: Optional[str] = None
    quantity: int = 0
    unit_price: float = 0.0
    total: Any = None
    status: SaleStatus = SaleStatus.COMPLETED
    created_at: Any = None


@dataclass(frozen=True, slots=True)
class Product:
    """Inventory item with its stock levels."""

    id: str
    name: str
    category: Optional[str] = None
    stock: int = 0
    min_stock: int = 0
    price: float = 0.0
    sku: Optional[str] = None

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock


@dataclass(frozen=True, slots=True)
class Customer:
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    total_purchases: float = 0.0


@dataclass(frozen=True, slots=True)
class Purchase:
    """Stock purchase from a supplier; counted as an expense."""

    id: str
    product_id: Optional[str] = None
    quantity: int = 0
    total: float = 0.0
    created_at: Any = None
