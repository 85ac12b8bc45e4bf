from __future__ import annotations

import random

from src.domain.entities.forecast import InsufficientData
from src.domain.entities.insight import InsightCategory, InsightPriority
from src.domain.entities.sales import Product
from src.domain.services.forecast_service import get_forecast
from src.domain.services.insight_generator import (
    INVENTORY_LINK,
    SALES_LINK,
    InsightGenerator,
    InsightOptions,
    InsightSnapshot,
    fallback_insight,
    top_product_rule,
)
from tests.conftest import make_sale


def test_no_data_yields_only_the_onboarding_card() -> None:
    insights = InsightGenerator().generate(InsightSnapshot(products=[], sales=[]))

    assert insights == [fallback_insight()]
    assert insights[0].id == "get-started"
    assert insights[0].priority == InsightPriority.LOW
    assert insights[0].link == SALES_LINK


def test_low_stock_counts_products_at_or_below_minimum(sample_products) -> None:
    insights = InsightGenerator().generate(
        InsightSnapshot(products=sample_products, sales=[])
    )

    assert [insight.id for insight in insights] == ["low-stock"]
    low_stock = insights[0]
    assert low_stock.priority == InsightPriority.HIGH
    assert low_stock.category == InsightCategory.INVENTORY
    assert low_stock.link == INVENTORY_LINK
    assert low_stock.description.startswith("1 product(s)")


def test_stock_equal_to_minimum_counts_as_low() -> None:
    products = [Product(id="p", name="Tea", stock=3, min_stock=3)]

    insights = InsightGenerator().generate(InsightSnapshot(products=products, sales=[]))

    assert insights[0].id == "low-stock"


def test_forecast_insight_sums_the_projection_window(linear_sales) -> None:
    forecast = get_forecast(linear_sales)

    insights = InsightGenerator().generate(
        InsightSnapshot(products=[], sales=linear_sales, forecast=forecast)
    )

    assert insights[0].id == "sales-prediction"
    assert insights[0].priority == InsightPriority.MEDIUM
    # 170 + 180 + ... + 230
    assert "R$ 1,400.00" in insights[0].description
    assert "next 7 days" in insights[0].description


def test_forecast_insight_respects_currency_and_window(linear_sales) -> None:
    forecast = get_forecast(linear_sales)
    generator = InsightGenerator(
        InsightOptions(currency_symbol="$", forecast_window_days=2)
    )

    insights = generator.generate(
        InsightSnapshot(products=[], sales=linear_sales, forecast=forecast)
    )

    assert "$ 350.00" in insights[0].description
    assert "next 2 days" in insights[0].description


def test_insufficient_forecast_produces_no_forecast_card(linear_sales) -> None:
    forecast = InsufficientData(message="not enough", days_analyzed=3, min_days=7)

    insights = InsightGenerator().generate(
        InsightSnapshot(products=[], sales=linear_sales[:3], forecast=forecast)
    )

    assert "sales-prediction" not in [insight.id for insight in insights]


def test_rules_fire_in_fixed_order(linear_sales, sample_products) -> None:
    snapshot = InsightSnapshot(
        products=sample_products,
        sales=linear_sales,
        forecast=get_forecast(linear_sales),
    )

    insights = InsightGenerator().generate(snapshot)

    assert [insight.id for insight in insights] == [
        "sales-prediction",
        "low-stock",
        "top-product",
    ]
    assert '"Coffee Beans"' in insights[2].description


def test_top_product_ties_resolve_to_catalog_order(sample_products) -> None:
    sales = [
        make_sale("1", 50, None, product_id="p2"),
        make_sale("2", 50, None, product_id="p1"),
    ]

    insight = top_product_rule(
        InsightSnapshot(products=sample_products, sales=sales), InsightOptions()
    )

    assert insight is not None
    assert '"Coffee Beans"' in insight.description


def test_top_product_ignores_sales_of_unknown_products(sample_products) -> None:
    sales = [
        make_sale("1", 500, None, product_id="deleted"),
        make_sale("2", 10, None, product_id="p2"),
    ]

    insight = top_product_rule(
        InsightSnapshot(products=sample_products, sales=sales), InsightOptions()
    )

    assert insight is not None
    assert '"Ceramic Mug"' in insight.description


def test_top_product_needs_a_catalog_match() -> None:
    sales = [make_sale("1", 500, None, product_id="deleted")]
    products = [Product(id="p1", name="Tea", stock=10, min_stock=1)]

    assert (
        top_product_rule(
            InsightSnapshot(products=products, sales=sales), InsightOptions()
        )
        is None
    )


def test_sales_order_does_not_change_insights(linear_sales, sample_products) -> None:
    shuffled = list(linear_sales)
    random.Random(7).shuffle(shuffled)
    generator = InsightGenerator()

    first = generator.generate(
        InsightSnapshot(sample_products, linear_sales, get_forecast(linear_sales))
    )
    second = generator.generate(
        InsightSnapshot(sample_products, shuffled, get_forecast(shuffled))
    )

    assert first == second


def test_custom_rules_replace_defaults() -> None:
    generator = InsightGenerator(rules=[lambda snapshot, options: None])

    insights = generator.generate(InsightSnapshot(products=[], sales=[]))

    assert [insight.id for insight in insights] == ["get-started"]
