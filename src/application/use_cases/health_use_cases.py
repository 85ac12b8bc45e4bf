"""Use cases behind the /health and /info endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.models import SystemInfo
from src.domain.entities.health import ApplicationInfo
from src.domain.ports.health_check import IHealthCheckService
from src.shared import get_logger

logger = get_logger(__name__)


def redact_url(url: str) -> str:
    """Strip user credentials from a URL before exposing it."""
    parsed = urlsplit(url)
    if not (parsed.username or parsed.password):
        return url

    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = f"{netloc}:{parsed.port}"
    return urlunsplit(parsed._replace(netloc=netloc))


class GetHealthStatusUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        system_health = await self._health_check_service.evaluate()
        if not system_health.is_operational:
            backend = system_health.dependency("data_backend")
            logger.warning(
                "health.data_backend.down",
                message=backend.message if backend else None,
            )
        return SystemHealthDTO.from_domain(system_health)


class GetApplicationInfoUseCase:
    """Reports build metadata, uptime and the active forecast parameters."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    def _extras(self) -> Dict[str, Any]:
        return {
            "forecast": {
                "min_days": self._info.forecast_min_days,
                "horizon_days": self._info.forecast_horizon_days,
                "timezone": self._info.forecast_timezone,
            },
            "data_backend": {"url": redact_url(self._info.data_backend_url)},
        }

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now

        return ApplicationInfoDTO.from_domain(
            ApplicationInfo(
                name=self._info.title,
                description=self._info.description,
                version=self._info.version,
                environment=self._info.environment,
                git_commit=self._info.git_commit,
                build_time=self._info.build_time,
                started_at=started,
                uptime_seconds=max(0.0, (now - started).total_seconds()),
                status=system_health.status,
                dependencies=system_health.dependencies,
                extras=self._extras(),
            )
        )
