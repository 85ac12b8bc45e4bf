from __future__ import annotations

import asyncio
import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import pytest

from src.domain.entities.sales import Customer, Product, Purchase, SaleRecord, SaleStatus

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_sale(
    sale_id: str,
    total: Any,
    created_at: Any,
    product_id: Optional[str] = "p1",
    customer_id: Optional[str] = "c1",
    quantity: int = 1,
) -> SaleRecord:
    return SaleRecord(
        id=sale_id,
        product_id=product_id,
        customer_id=customer_id,
        quantity=quantity,
        unit_price=0.0,
        total=total,
        status=SaleStatus.COMPLETED,
        created_at=created_at,
    )


def daily_sales(
    totals: Sequence[float], start: date = date(2024, 9, 2), product_id: str = "p1"
) -> List[SaleRecord]:
    """One sale at noon UTC per consecutive day, with the given totals."""
    records = []
    for index, total in enumerate(totals):
        day = start + timedelta(days=index)
        records.append(
            make_sale(
                f"s{index}",
                total,
                datetime(day.year, day.month, day.day, 12, tzinfo=timezone.utc),
                product_id=product_id,
            )
        )
    return records


class StubRepository:
    """In-memory repository recording how it was queried."""

    def __init__(
        self,
        items: Sequence[Any] = (),
        delay: float = 0.0,
        error: Optional[Exception] = None,
    ):
        self.items = list(items)
        self.delay = delay
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def find_all(self, access_token: Optional[str] = None) -> List[Any]:
        return await self._respond(access_token=access_token)

    async def _respond(self, **call: Any) -> List[Any]:
        self.calls.append(call)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.items)


class StubSaleRepository(StubRepository):
    async def find_all(
        self,
        status: Optional[SaleStatus] = None,
        access_token: Optional[str] = None,
    ) -> List[Any]:
        return await self._respond(status=status, access_token=access_token)


@pytest.fixture()
def sale_factory() -> Callable[..., SaleRecord]:
    return make_sale


@pytest.fixture()
def linear_sales() -> List[SaleRecord]:
    return daily_sales([100, 110, 120, 130, 140, 150, 160])


@pytest.fixture()
def sample_products() -> List[Product]:
    return [
        Product(
            id="p1",
            name="Coffee Beans",
            category="Groceries",
            stock=2,
            min_stock=5,
            price=30.0,
            sku="CB-01",
        ),
        Product(
            id="p2",
            name="Ceramic Mug",
            category="Kitchen",
            stock=10,
            min_stock=3,
            price=15.0,
        ),
    ]


@pytest.fixture()
def sample_customers() -> List[Customer]:
    return [
        Customer(
            id="c1",
            name="Ana Souza",
            email="ana@example.com",
            phone="+55 11 99999-0000",
            total_purchases=250.0,
        ),
        Customer(id="c2", name="Bruno Lima", total_purchases=150.0),
    ]


@pytest.fixture()
def sample_purchases() -> List[Purchase]:
    return [
        Purchase(id="u1", product_id="p1", quantity=10, total=200.0),
        Purchase(id="u2", product_id="p2", quantity=5, total=50.0),
    ]


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)
