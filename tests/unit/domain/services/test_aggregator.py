from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from src.domain.entities.sales import Product
from src.domain.services.aggregator import (
    UNKNOWN_PRODUCT_LABEL,
    aggregate_by_key,
    aggregate_daily,
    coerce_total,
    revenue_by_category,
    sale_day,
    top_products,
    total_revenue,
)
from tests.conftest import make_sale


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, 10.0),
        (12.5, 12.5),
        (Decimal("7.25"), 7.25),
        (" 19.90 ", 19.9),
        (0, 0.0),
    ],
)
def test_coerce_total_accepts_numeric_values(value, expected) -> None:
    assert coerce_total(value) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        -1,
        "abc",
        float("nan"),
        float("inf"),
        [10],
        10**400,
        "1e400",
        Decimal("sNaN"),
        Decimal("Infinity"),
    ],
)
def test_coerce_total_rejects_unusable_values(value) -> None:
    assert coerce_total(value) is None


def test_sale_day_reads_naive_timestamps_as_utc() -> None:
    assert sale_day("2024-09-02T23:30:00", "UTC") == date(2024, 9, 2)


def test_sale_day_converts_to_reference_timezone() -> None:
    assert sale_day("2024-09-02T01:00:00Z", "America/Sao_Paulo") == date(2024, 9, 1)


@pytest.mark.parametrize("value", [None, "", "not a date"])
def test_sale_day_returns_none_for_invalid_timestamps(value) -> None:
    assert sale_day(value, "UTC") is None


def test_aggregate_daily_groups_by_day_and_sorts() -> None:
    records = [
        make_sale("a", 30, "2024-09-03T10:00:00Z"),
        make_sale("b", 10, "2024-09-02T09:00:00Z"),
        make_sale("c", 15.5, "2024-09-02T18:00:00Z"),
    ]

    daily = aggregate_daily(records)

    assert [point.date for point in daily] == [date(2024, 9, 2), date(2024, 9, 3)]
    assert daily[0].total == pytest.approx(25.5)
    assert daily[0].sale_count == 2
    assert daily[1].total == pytest.approx(30.0)
    assert daily[1].sale_count == 1


def test_aggregate_daily_skips_malformed_records() -> None:
    records = [
        make_sale("ok", 50, datetime(2024, 9, 2, 12, tzinfo=timezone.utc)),
        make_sale("negative", -5, "2024-09-02T12:00:00Z"),
        make_sale("missing", None, "2024-09-02T12:00:00Z"),
        make_sale("text", "abc", "2024-09-02T12:00:00Z"),
        make_sale("no-date", 20, None),
    ]

    daily = aggregate_daily(records)

    assert len(daily) == 1
    assert daily[0].total == pytest.approx(50.0)
    assert daily[0].sale_count == 1


def test_aggregate_daily_is_order_independent_and_idempotent(linear_sales) -> None:
    forward = aggregate_daily(linear_sales)
    backward = aggregate_daily(list(reversed(linear_sales)))

    assert forward == backward
    assert aggregate_daily(linear_sales) == forward


def test_aggregate_daily_returns_empty_list_without_valid_records() -> None:
    assert aggregate_daily([]) == []
    assert aggregate_daily([make_sale("x", None, None)]) == []


def test_aggregate_daily_uses_reference_timezone() -> None:
    records = [make_sale("late", 40, "2024-09-03T02:00:00Z")]

    assert aggregate_daily(records, tz="UTC")[0].date == date(2024, 9, 3)
    assert aggregate_daily(records, tz="America/Sao_Paulo")[0].date == date(
        2024, 9, 2
    )


def test_aggregate_by_key_keeps_first_seen_order_and_skips_missing_keys() -> None:
    records = [
        make_sale("1", 10, None, product_id="b"),
        make_sale("2", 5, None, product_id="a"),
        make_sale("3", 7, None, product_id=None),
        make_sale("4", 1, None, product_id="b"),
        make_sale("5", "bad", None, product_id="a"),
    ]

    revenue = aggregate_by_key(records, lambda sale: sale.product_id)

    assert list(revenue) == ["b", "a"]
    assert revenue == {"b": 11.0, "a": 5.0}


def test_total_revenue_ignores_invalid_totals() -> None:
    records = [
        make_sale("1", 10, None),
        make_sale("2", "2.5", None),
        make_sale("3", -1, None),
    ]
    assert total_revenue(records) == pytest.approx(12.5)


def test_top_products_ranks_by_revenue_with_limit(sample_products) -> None:
    records = [
        make_sale("1", 10, None, product_id="p1"),
        make_sale("2", 40, None, product_id="p2"),
        make_sale("3", 5, None, product_id="ghost"),
    ]

    ranked = top_products(records, sample_products, limit=2)

    assert ranked == [("Ceramic Mug", 40.0), ("Coffee Beans", 10.0)]
    assert top_products(records, sample_products)[-1] == (UNKNOWN_PRODUCT_LABEL, 5.0)


def test_top_products_keeps_input_order_on_ties(sample_products) -> None:
    records = [
        make_sale("1", 20, None, product_id="p2"),
        make_sale("2", 20, None, product_id="p1"),
    ]

    ranked = top_products(records, sample_products)

    assert [name for name, _ in ranked] == ["Ceramic Mug", "Coffee Beans"]


def test_revenue_by_category_skips_uncategorised_products() -> None:
    products = [
        Product(id="p1", name="A", category="Drinks"),
        Product(id="p2", name="B", category=None),
        Product(id="p3", name="C", category="Drinks"),
    ]
    records = [
        make_sale("1", 10, None, product_id="p1"),
        make_sale("2", 99, None, product_id="p2"),
        make_sale("3", 5, None, product_id="p3"),
    ]

    assert revenue_by_category(records, products) == {"Drinks": 15.0}
