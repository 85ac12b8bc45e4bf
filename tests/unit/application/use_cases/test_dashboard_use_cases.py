from __future__ import annotations

import pytest

from src.application.dtos.forecast_dto import (
    ForecastResponseDTO,
    InsufficientDataResponseDTO,
)
from src.application.use_cases.dashboard_use_cases import GetDashboardUseCase
from src.domain.entities.errors import DataBackendError
from tests.conftest import StubRepository, StubSaleRepository, make_sale


@pytest.mark.asyncio
async def test_dashboard_assembles_metrics_and_charts(
    linear_sales, sample_products, sample_customers
) -> None:
    sales = linear_sales + [
        make_sale("mug", 45, "2024-09-08T09:00:00Z", product_id="p2")
    ]
    use_case = GetDashboardUseCase(
        StubSaleRepository(sales),
        StubRepository(sample_products),
        StubRepository(sample_customers),
    )

    dto = await use_case.execute(access_token="t")

    assert dto.metrics.total_revenue == pytest.approx(955.0)
    assert dto.metrics.sales_count == 8
    assert dto.metrics.customers_count == 2
    assert dto.metrics.products_count == 2
    assert [(p.name, p.revenue) for p in dto.top_products] == [
        ("Coffee Beans", 910.0),
        ("Ceramic Mug", 45.0),
    ]
    assert {c.category: c.revenue for c in dto.category_revenue} == {
        "Groceries": 910.0,
        "Kitchen": 45.0,
    }
    assert isinstance(dto.forecast, ForecastResponseDTO)
    assert [insight.id for insight in dto.insights] == [
        "sales-prediction",
        "low-stock",
        "top-product",
    ]


@pytest.mark.asyncio
async def test_dashboard_limits_top_products(linear_sales, sample_products) -> None:
    use_case = GetDashboardUseCase(
        StubSaleRepository(linear_sales),
        StubRepository(sample_products),
        StubRepository(),
        top_products_limit=1,
    )

    dto = await use_case.execute()

    assert len(dto.top_products) == 1


@pytest.mark.asyncio
async def test_dashboard_keeps_insight_order_when_fetches_finish_out_of_order(
    linear_sales, sample_products, sample_customers
) -> None:
    fast_sales = GetDashboardUseCase(
        StubSaleRepository(linear_sales, delay=0.0),
        StubRepository(sample_products, delay=0.02),
        StubRepository(sample_customers, delay=0.01),
    )
    slow_sales = GetDashboardUseCase(
        StubSaleRepository(linear_sales, delay=0.02),
        StubRepository(sample_products, delay=0.0),
        StubRepository(sample_customers, delay=0.01),
    )

    first = await fast_sales.execute()
    second = await slow_sales.execute()

    assert [i.id for i in first.insights] == [i.id for i in second.insights]
    assert first.model_dump() == second.model_dump()


@pytest.mark.asyncio
async def test_dashboard_reports_insufficient_forecast() -> None:
    use_case = GetDashboardUseCase(
        StubSaleRepository(), StubRepository(), StubRepository()
    )

    dto = await use_case.execute()

    assert dto.metrics.total_revenue == 0
    assert dto.top_products == []
    assert isinstance(dto.forecast, InsufficientDataResponseDTO)
    assert dto.forecast.days_analyzed == 0
    assert [insight.id for insight in dto.insights] == ["get-started"]


@pytest.mark.asyncio
async def test_dashboard_propagates_backend_errors(linear_sales) -> None:
    use_case = GetDashboardUseCase(
        StubSaleRepository(linear_sales),
        StubRepository(error=DataBackendError("boom")),
        StubRepository(),
    )

    with pytest.raises(DataBackendError):
        await use_case.execute()
