"""Health check for the hosted data backend."""

from __future__ import annotations

from time import perf_counter
from typing import Iterable, Optional

from src.domain.entities.errors import DataBackendError
from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.ports.health_check import IHealthCheckService
from src.infrastructure.gateways.supabase_gateway import SupabaseGateway

DATA_BACKEND = "data_backend"

# Worst first
_SEVERITY = (
    ServiceStatus.DOWN,
    ServiceStatus.DEGRADED,
    ServiceStatus.UNKNOWN,
    ServiceStatus.UP,
)


class HealthCheckService(IHealthCheckService):
    """Pings the data backend and folds the result into a system status."""

    def __init__(self, gateway: Optional[SupabaseGateway]) -> None:
        self._gateway = gateway

    async def evaluate(self) -> SystemHealth:
        dependencies = [await self._check_data_backend()]
        return SystemHealth(
            status=self._aggregate_status(dependencies), dependencies=dependencies
        )

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        present = {dep.status for dep in statuses}
        return next(
            (status for status in _SEVERITY if status in present), ServiceStatus.UP
        )

    async def _check_data_backend(self) -> DependencyStatus:
        if self._gateway is None or not self._gateway.base_url:
            return DependencyStatus(
                name=DATA_BACKEND,
                status=ServiceStatus.UNKNOWN,
                message="Data backend URL not configured.",
            )

        start = perf_counter()
        try:
            await self._gateway.ping()
        except DataBackendError as exc:
            # A 4xx still proves the backend is reachable
            reachable = exc.status_code is not None and exc.status_code < 500
            return DependencyStatus(
                name=DATA_BACKEND,
                status=ServiceStatus.DEGRADED if reachable else ServiceStatus.DOWN,
                message=exc.message,
                latency_ms=(perf_counter() - start) * 1000,
                details={"status_code": exc.status_code},
            )

        return DependencyStatus(
            name=DATA_BACKEND,
            status=ServiceStatus.UP,
            message="Data backend reachable",
            latency_ms=(perf_counter() - start) * 1000,
        )
