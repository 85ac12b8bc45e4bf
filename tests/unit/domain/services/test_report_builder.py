from __future__ import annotations

import pytest

from src.domain.entities.report import EmptyReport, MetricUnit, ReportSummary, ReportType
from src.domain.entities.sales import Purchase
from src.domain.services.report_builder import (
    NOT_AVAILABLE,
    build_customers_report,
    build_financial_report,
    build_inventory_report,
    build_report,
    build_sales_report,
)
from tests.conftest import make_sale


def _metrics(report: ReportSummary) -> dict:
    return {metric.label: metric.value for metric in report.summary}


def test_sales_report_resolves_names_and_totals(
    sample_products, sample_customers
) -> None:
    sales = [
        make_sale("1", 60, "2024-09-02T12:00:00Z", product_id="p1", customer_id="c1"),
        make_sale("2", 40, "2024-09-03T12:00:00Z", product_id="p9", customer_id="c9"),
    ]

    report = build_sales_report(sales, sample_products, sample_customers)

    assert isinstance(report, ReportSummary)
    assert report.title == "Sales Report"
    assert _metrics(report) == {
        "Total Sales": 2,
        "Total Revenue": 100.0,
        "Average Ticket": 50.0,
    }
    assert report.summary[0].unit == MetricUnit.COUNT
    assert report.rows[0] == ["2024-09-02", "Ana Souza", "Coffee Beans", 1, 60.0]
    assert report.rows[1][1:3] == [NOT_AVAILABLE, NOT_AVAILABLE]


def test_sales_report_counts_missing_totals_as_zero() -> None:
    report = build_sales_report([make_sale("1", None, None)], [], [])

    assert _metrics(report)["Total Revenue"] == 0.0
    assert report.rows[0][0] == NOT_AVAILABLE


def test_inventory_report_values_stock(sample_products) -> None:
    report = build_inventory_report(sample_products)

    assert _metrics(report) == {
        "Total Products": 2,
        "Stock Value": pytest.approx(2 * 30.0 + 10 * 15.0),
        "Low Stock Products": 1,
    }
    assert report.rows[1] == ["Ceramic Mug", NOT_AVAILABLE, "Kitchen", 10, 15.0]


def test_customers_report_averages_spending(sample_customers) -> None:
    report = build_customers_report(sample_customers)

    assert _metrics(report) == {
        "Total Customers": 2,
        "Total Spent": 400.0,
        "Average per Customer": 200.0,
    }
    assert report.rows[1] == ["Bruno Lima", NOT_AVAILABLE, NOT_AVAILABLE, 150.0]


def test_financial_report_computes_profit(sample_purchases) -> None:
    sales = [make_sale("1", 300, None), make_sale("2", 100, None)]

    report = build_financial_report(sales, sample_purchases)

    assert _metrics(report) == {
        "Total Revenue": 400.0,
        "Total Expenses": 250.0,
        "Net Profit": 150.0,
    }


def test_financial_report_allows_losses() -> None:
    report = build_financial_report([], [Purchase(id="u", total=80.0)])

    assert _metrics(report)["Net Profit"] == -80.0


@pytest.mark.parametrize("report_type", list(ReportType))
def test_empty_inputs_produce_empty_report(report_type) -> None:
    outcome = build_report(report_type)

    assert isinstance(outcome, EmptyReport)
    assert outcome.report_type == report_type
    assert outcome.message


def test_build_report_dispatches_on_type(sample_products) -> None:
    outcome = build_report(ReportType.INVENTORY, products=sample_products)

    assert isinstance(outcome, ReportSummary)
    assert outcome.report_type == ReportType.INVENTORY
