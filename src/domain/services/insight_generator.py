"""
Domain service - insight generator.

A small ordered rule engine. Every rule looks at the same snapshot (products,
sales, forecast outcome) and may emit one insight; rules do not see each
other's output, so missing data for one rule never blocks another. The order
of ``RULES`` is the presentation priority of the cards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import structlog

from src.domain.entities.forecast import ForecastOutcome, ForecastResult
from src.domain.entities.insight import Insight, InsightCategory, InsightPriority
from src.domain.entities.sales import Product, SaleRecord
from src.domain.services.aggregator import aggregate_by_key

logger = structlog.get_logger(__name__)

SALES_LINK = "/vendas"
INVENTORY_LINK = "/estoque"


@dataclass(frozen=True)
class InsightSnapshot:
    """Current state the rules are evaluated against."""

    products: Sequence[Product]
    sales: Sequence[SaleRecord]
    forecast: Optional[ForecastOutcome] = None


@dataclass(frozen=True)
class InsightOptions:
    currency_symbol: str = "R$"
    forecast_window_days: int = 7

    def format_currency(self, amount: float) -> str:
        return f"{self.currency_symbol} {amount:,.2f}"


Rule = Callable[[InsightSnapshot, InsightOptions], Optional[Insight]]


def forecast_rule(snapshot: InsightSnapshot, options: InsightOptions) -> Optional[Insight]:
    forecast = snapshot.forecast
    if not isinstance(forecast, ForecastResult) or not forecast.predictions:
        return None

    window = forecast.predictions[: options.forecast_window_days]
    projected = sum(point.predicted_value for point in window)
    return Insight(
        id="sales-prediction",
        priority=InsightPriority.MEDIUM,
        category=InsightCategory.SALES,
        title="Sales Forecast",
        description=(
            f"Projected revenue of {options.format_currency(projected)} "
            f"for the next {len(window)} days."
        ),
        link=SALES_LINK,
    )


def low_stock_rule(snapshot: InsightSnapshot, options: InsightOptions) -> Optional[Insight]:
    low_stock = sum(1 for product in snapshot.products if product.is_low_stock)
    if low_stock == 0:
        return None

    return Insight(
        id="low-stock",
        priority=InsightPriority.HIGH,
        category=InsightCategory.INVENTORY,
        title="Low Stock Alert",
        description=(
            f"{low_stock} product(s) need restocking soon to avoid lost sales."
        ),
        link=INVENTORY_LINK,
    )


def top_product_rule(
    snapshot: InsightSnapshot, options: InsightOptions
) -> Optional[Insight]:
    if not snapshot.sales or not snapshot.products:
        return None

    revenue = aggregate_by_key(snapshot.sales, lambda sale: sale.product_id)

    # Walk the catalog so equal revenue resolves to the first listed product.
    top: Optional[Product] = None
    top_revenue = 0.0
    for product in snapshot.products:
        amount = revenue.get(product.id)
        if amount is None:
            continue
        if top is None or amount > top_revenue:
            top, top_revenue = product, amount

    if top is None:
        return None

    return Insight(
        id="top-product",
        priority=InsightPriority.MEDIUM,
        category=InsightCategory.INVENTORY,
        title="Top Product",
        description=(
            f'"{top.name}" is your best-selling product. '
            "Consider running a campaign for it."
        ),
        link=INVENTORY_LINK,
    )


def fallback_insight() -> Insight:
    return Insight(
        id="get-started",
        priority=InsightPriority.LOW,
        category=InsightCategory.ONBOARDING,
        title="Start Using Insights",
        description=(
            "Add sales and products so personalised insights can be "
            "generated for your business."
        ),
        link=SALES_LINK,
    )


RULES: List[Rule] = [forecast_rule, low_stock_rule, top_product_rule]


class InsightGenerator:
    """Evaluates the rules in order and returns the resulting cards."""

    def __init__(
        self,
        options: Optional[InsightOptions] = None,
        rules: Optional[Sequence[Rule]] = None,
    ) -> None:
        self.options = options or InsightOptions()
        self.rules = list(rules) if rules is not None else list(RULES)

    def generate(self, snapshot: InsightSnapshot) -> List[Insight]:
        insights: List[Insight] = []
        for rule in self.rules:
            insight = rule(snapshot, self.options)
            if insight is not None:
                insights.append(insight)

        if not insights:
            insights.append(fallback_insight())

        logger.debug(
            "insights.generated", ids=[insight.id for insight in insights]
        )
        return insights
