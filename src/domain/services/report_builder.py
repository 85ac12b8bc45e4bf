"""
Domain service - report builder.

Computes headline metrics and tables for the sales, inventory, customers and
financial reports. Missing numeric fields count as zero.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from src.domain.entities.report import (
    EmptyReport,
    MetricUnit,
    ReportOutcome,
    ReportSummary,
    ReportType,
    SummaryMetric,
)
from src.domain.entities.sales import Customer, Product, Purchase, SaleRecord
from src.domain.services.aggregator import DEFAULT_TIMEZONE, coerce_total, sale_day

NOT_AVAILABLE = "N/A"


def _amount(value: Any) -> float:
    return coerce_total(value) or 0.0


def _average(total: float, count: int) -> float:
    return total / count if count else 0.0


def build_sales_report(
    sales: Sequence[SaleRecord],
    products: Sequence[Product],
    customers: Sequence[Customer],
    tz: str = DEFAULT_TIMEZONE,
) -> ReportOutcome:
    if not sales:
        return EmptyReport(ReportType.SALES, "There are no sales to report on.")

    product_names = {product.id: product.name for product in products}
    customer_names = {customer.id: customer.name for customer in customers}
    revenue = sum(_amount(sale.total) for sale in sales)

    rows: List[List[Any]] = []
    for sale in sales:
        day = sale_day(sale.created_at, tz)
        rows.append(
            [
                day.isoformat() if day else NOT_AVAILABLE,
                customer_names.get(sale.customer_id, NOT_AVAILABLE),
                product_names.get(sale.product_id, NOT_AVAILABLE),
                sale.quantity,
                _amount(sale.total),
            ]
        )

    return ReportSummary(
        report_type=ReportType.SALES,
        title="Sales Report",
        summary=[
            SummaryMetric("Total Sales", len(sales), MetricUnit.COUNT),
            SummaryMetric("Total Revenue", revenue),
            SummaryMetric("Average Ticket", _average(revenue, len(sales))),
        ],
        columns=["Date", "Customer", "Product", "Qty", "Total"],
        rows=rows,
    )


def build_inventory_report(products: Sequence[Product]) -> ReportOutcome:
    if not products:
        return EmptyReport(
            ReportType.INVENTORY, "There are no products to report on."
        )

    stock_value = sum(product.price * product.stock for product in products)
    low_stock = sum(1 for product in products if product.is_low_stock)

    return ReportSummary(
        report_type=ReportType.INVENTORY,
        title="Inventory Report",
        summary=[
            SummaryMetric("Total Products", len(products), MetricUnit.COUNT),
            SummaryMetric("Stock Value", stock_value),
            SummaryMetric("Low Stock Products", low_stock, MetricUnit.COUNT),
        ],
        columns=["Product", "SKU", "Category", "Stock", "Price"],
        rows=[
            [
                product.name,
                product.sku or NOT_AVAILABLE,
                product.category or NOT_AVAILABLE,
                product.stock,
                product.price,
            ]
            for product in products
        ],
    )


def build_customers_report(customers: Sequence[Customer]) -> ReportOutcome:
    if not customers:
        return EmptyReport(
            ReportType.CUSTOMERS, "There are no customers to report on."
        )

    spent = sum(customer.total_purchases for customer in customers)

    return ReportSummary(
        report_type=ReportType.CUSTOMERS,
        title="Customers Report",
        summary=[
            SummaryMetric("Total Customers", len(customers), MetricUnit.COUNT),
            SummaryMetric("Total Spent", spent),
            SummaryMetric("Average per Customer", _average(spent, len(customers))),
        ],
        columns=["Name", "Email", "Phone", "Total Spent"],
        rows=[
            [
                customer.name,
                customer.email or NOT_AVAILABLE,
                customer.phone or NOT_AVAILABLE,
                customer.total_purchases,
            ]
            for customer in customers
        ],
    )


def build_financial_report(
    sales: Sequence[SaleRecord], purchases: Sequence[Purchase]
) -> ReportOutcome:
    revenue = sum(_amount(sale.total) for sale in sales)
    expenses = sum(_amount(purchase.total) for purchase in purchases)
    if revenue == 0 and expenses == 0:
        return EmptyReport(
            ReportType.FINANCIAL, "There is no financial activity to report on."
        )

    profit = revenue - expenses
    return ReportSummary(
        report_type=ReportType.FINANCIAL,
        title="Financial Report",
        summary=[
            SummaryMetric("Total Revenue", revenue),
            SummaryMetric("Total Expenses", expenses),
            SummaryMetric("Net Profit", profit),
        ],
        columns=["Type", "Description", "Amount"],
        rows=[
            ["Revenue", "Total sales", revenue],
            ["Expense", "Total purchases", expenses],
            ["Net Profit", "Revenue - Expenses", profit],
        ],
    )


def build_report(
    report_type: ReportType,
    sales: Sequence[SaleRecord] = (),
    products: Sequence[Product] = (),
    customers: Sequence[Customer] = (),
    purchases: Sequence[Purchase] = (),
    tz: str = DEFAULT_TIMEZONE,
) -> ReportOutcome:
    """Build the requested report from the collections it needs."""

    builders: Dict[ReportType, Callable[[], ReportOutcome]] = {
        ReportType.SALES: lambda: build_sales_report(sales, products, customers, tz),
        ReportType.INVENTORY: lambda: build_inventory_report(products),
        ReportType.CUSTOMERS: lambda: build_customers_report(customers),
        ReportType.FINANCIAL: lambda: build_financial_report(sales, purchases),
    }
    return builders[report_type]()
