from __future__ import annotations

import pytest

from src.application.dtos.report_dto import EmptyReportDTO, ReportSummaryDTO
from src.application.use_cases.report_use_cases import GetReportUseCase
from src.domain.entities.report import ReportType
from src.domain.entities.sales import SaleStatus
from tests.conftest import StubRepository, StubSaleRepository


def _use_case(sales=(), products=(), customers=(), purchases=()):
    repositories = {
        "sales": StubSaleRepository(sales),
        "products": StubRepository(products),
        "customers": StubRepository(customers),
        "purchases": StubRepository(purchases),
    }
    use_case = GetReportUseCase(
        sale_repository=repositories["sales"],
        product_repository=repositories["products"],
        customer_repository=repositories["customers"],
        purchase_repository=repositories["purchases"],
    )
    return use_case, repositories


@pytest.mark.asyncio
async def test_inventory_report_only_fetches_products(sample_products) -> None:
    use_case, repositories = _use_case(products=sample_products)

    dto = await use_case.execute(ReportType.INVENTORY, access_token="t")

    assert isinstance(dto, ReportSummaryDTO)
    assert dto.report_type == ReportType.INVENTORY
    assert repositories["products"].calls == [{"access_token": "t"}]
    assert repositories["sales"].calls == []
    assert repositories["customers"].calls == []
    assert repositories["purchases"].calls == []


@pytest.mark.asyncio
async def test_sales_report_resolves_catalog_names(
    linear_sales, sample_products, sample_customers
) -> None:
    use_case, repositories = _use_case(
        sales=linear_sales, products=sample_products, customers=sample_customers
    )

    dto = await use_case.execute(ReportType.SALES)

    assert isinstance(dto, ReportSummaryDTO)
    assert dto.rows[0][1:3] == ["Ana Souza", "Coffee Beans"]
    assert repositories["sales"].calls[0]["status"] == SaleStatus.COMPLETED


@pytest.mark.asyncio
async def test_financial_report_uses_sales_and_purchases(
    linear_sales, sample_purchases
) -> None:
    use_case, repositories = _use_case(sales=linear_sales, purchases=sample_purchases)

    dto = await use_case.execute(ReportType.FINANCIAL)

    assert isinstance(dto, ReportSummaryDTO)
    assert dto.summary[2].value == pytest.approx(910.0 - 250.0)
    assert repositories["products"].calls == []


@pytest.mark.asyncio
async def test_empty_customers_report() -> None:
    use_case, _ = _use_case()

    dto = await use_case.execute(ReportType.CUSTOMERS)

    assert isinstance(dto, EmptyReportDTO)
    assert dto.error == "No data"
