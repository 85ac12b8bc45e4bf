"""
Domain service - revenue aggregation.

Turns raw sale records into the daily revenue series used by the trend model
and into keyed rollups (per product, per category) used by the dashboard and
the insight rules.

Records with a missing, negative or non-numeric total, or without a usable
timestamp, are skipped. Skips are logged as a count and never raised.
"""

from __future__ import annotations

import math
from datetime import date
from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple

import pandas as pd
import structlog

from src.domain.entities.sales import Product, SaleRecord
from src.domain.entities.time_series import DailyPoint

logger = structlog.get_logger(__name__)

DEFAULT_TIMEZONE = "UTC"
UNKNOWN_PRODUCT_LABEL = "Unknown"


def coerce_total(value: Any) -> Optional[float]:
    """Return the sale total as a float, or None when it cannot be used."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (Real, Decimal)):
        return None

    # Huge integers overflow and signaling NaNs refuse conversion
    try:
        amount = float(value)
    except (ValueError, OverflowError):
        return None

    if not math.isfinite(amount) or amount < 0:
        return None
    return amount


def sale_day(value: Any, tz: str) -> Optional[date]:
    """Truncate a sale timestamp to a calendar day in the reference timezone."""

    if value is None or value == "":
        return None
    try:
        timestamp = pd.Timestamp(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(timestamp):
        return None

    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize("UTC")
    return timestamp.tz_convert(tz).date()


def aggregate_daily(
    records: Iterable[SaleRecord], tz: str = DEFAULT_TIMEZONE
) -> List[DailyPoint]:
    """
    Group sales by calendar day and sum their totals.

    Args:
        records: Sale records in any order
        tz: IANA timezone name used to decide which day a sale belongs to

    Returns:
        One DailyPoint per day that had at least one valid sale, ascending
        by date. Days without sales are not synthesized.
    """
    rows: List[Tuple[date, float]] = []
    skipped = 0

    for record in records:
        amount = coerce_total(record.total)
        day = sale_day(record.created_at, tz)
        if amount is None or day is None:
            skipped += 1
            continue
        rows.append((day, amount))

    if skipped:
        logger.debug("aggregate.daily.records_skipped", skipped=skipped)

    if not rows:
        return []

    frame = pd.DataFrame(rows, columns=["date", "total"])
    daily = (
        frame.groupby("date", sort=True)["total"]
        .agg(total="sum", sale_count="count")
        .reset_index()
    )

    return [
        DailyPoint(
            date=row.date, total=float(row.total), sale_count=int(row.sale_count)
        )
        for row in daily.itertuples(index=False)
    ]


def aggregate_by_key(
    records: Iterable[SaleRecord],
    key_fn: Callable[[SaleRecord], Optional[Hashable]],
) -> Dict[Hashable, float]:
    """
    Sum valid sale totals per key.

    Records for which ``key_fn`` returns None are left out. The mapping keeps
    the order in which keys were first seen, so a stable sort on revenue
    breaks ties by input order.
    """
    revenue: Dict[Hashable, float] = {}
    for record in records:
        amount = coerce_total(record.total)
        if amount is None:
            continue
        key = key_fn(record)
        if key is None:
            continue
        revenue[key] = revenue.get(key, 0.0) + amount
    return revenue


def total_revenue(records: Iterable[SaleRecord]) -> float:
    return sum(
        amount
        for amount in (coerce_total(record.total) for record in records)
        if amount is not None
    )


def top_products(
    records: Iterable[SaleRecord],
    products: Iterable[Product],
    limit: int = 5,
) -> List[Tuple[str, float]]:
    """Best-selling products by revenue as ``(name, revenue)`` pairs."""

    names = {product.id: product.name for product in products}
    revenue = aggregate_by_key(records, lambda sale: sale.product_id)
    ranked = sorted(revenue.items(), key=lambda item: item[1], reverse=True)

    return [
        (names.get(product_id, UNKNOWN_PRODUCT_LABEL), amount)
        for product_id, amount in ranked[:limit]
    ]


def revenue_by_category(
    records: Iterable[SaleRecord], products: Iterable[Product]
) -> Dict[str, float]:
    """Revenue per product category; uncategorised products are left out."""

    categories = {
        product.id: product.category for product in products if product.category
    }
    return aggregate_by_key(records, lambda sale: categories.get(sale.product_id))
