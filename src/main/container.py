"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import Optional

from dependency_injector import containers, providers

from src.application.models import ForecastOptions, SystemInfo
from src.application.use_cases.dashboard_use_cases import GetDashboardUseCase
from src.application.use_cases.forecast_use_cases import GetSalesForecastUseCase
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.insight_use_cases import GetInsightsUseCase
from src.application.use_cases.report_use_cases import GetReportUseCase
from src.domain.services.insight_generator import InsightGenerator, InsightOptions
from src.infrastructure.gateways.supabase_gateway import SupabaseGateway
from src.infrastructure.repositories.customer_repository import CustomerRepository
from src.infrastructure.repositories.product_repository import ProductRepository
from src.infrastructure.repositories.purchase_repository import PurchaseRepository
from src.infrastructure.repositories.sale_repository import SaleRepository
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _configured_gateway(gateway: SupabaseGateway) -> Optional[SupabaseGateway]:
    return gateway if gateway.base_url else None


def _environment_name(env) -> str:
    return env.value if hasattr(env, "value") else str(env)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Gateways
    supabase_gateway = providers.Singleton(
        SupabaseGateway,
        base_url=config.supabase.url,
        api_key=config.supabase.api_key,
        timeout=config.supabase.timeout,
        page_size=config.supabase.page_size,
    )

    # Repositories
    sale_repository = providers.Singleton(SaleRepository, gateway=supabase_gateway)
    product_repository = providers.Singleton(
        ProductRepository, gateway=supabase_gateway
    )
    customer_repository = providers.Singleton(
        CustomerRepository, gateway=supabase_gateway
    )
    purchase_repository = providers.Singleton(
        PurchaseRepository, gateway=supabase_gateway
    )

    # Domain services
    forecast_options = providers.Singleton(
        ForecastOptions,
        min_days=config.forecast.min_days,
        horizon_days=config.forecast.horizon_days,
        timezone=config.forecast.timezone,
    )

    insight_generator = providers.Singleton(
        InsightGenerator,
        options=providers.Singleton(
            InsightOptions,
            currency_symbol=config.insights.currency_symbol,
            forecast_window_days=config.insights.forecast_window_days,
        ),
    )

    # Application (use cases)
    get_sales_forecast_use_case = providers.Factory(
        GetSalesForecastUseCase,
        sale_repository=sale_repository,
        options=forecast_options,
    )

    get_insights_use_case = providers.Factory(
        GetInsightsUseCase,
        sale_repository=sale_repository,
        product_repository=product_repository,
        insight_generator=insight_generator,
        forecast_options=forecast_options,
    )

    get_dashboard_use_case = providers.Factory(
        GetDashboardUseCase,
        sale_repository=sale_repository,
        product_repository=product_repository,
        customer_repository=customer_repository,
        insight_generator=insight_generator,
        forecast_options=forecast_options,
        top_products_limit=config.insights.top_products_limit,
    )

    get_report_use_case = providers.Factory(
        GetReportUseCase,
        sale_repository=sale_repository,
        product_repository=product_repository,
        customer_repository=customer_repository,
        purchase_repository=purchase_repository,
        timezone=config.forecast.timezone,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        gateway=providers.Callable(_configured_gateway, supabase_gateway),
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(_environment_name, config.environment),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
        data_backend_url=config.supabase.url,
        forecast_min_days=config.forecast.min_days,
        forecast_horizon_days=config.forecast.horizon_days,
        forecast_timezone=config.forecast.timezone,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    The gateway opens one HTTP client per request, so there is nothing to
    connect on startup; the data backend configuration is only reported.
    """
    container = get_container()
    gateway = container.supabase_gateway()

    if not gateway.base_url:
        logger.warning("container.data_backend.not_configured")
    else:
        logger.info(
            "container.data_backend.configured",
            page_size=gateway.page_size,
            timeout=gateway.timeout,
        )

    try:
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.resources.shutdown")
