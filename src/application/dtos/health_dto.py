"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)

_BACKEND_EXAMPLE = {
    "name": "data_backend",
    "status": "up",
    "message": "Data backend reachable",
    "checked_at": "2024-09-09T12:00:00Z",
    "latency_ms": 41.7,
    "details": {"url": "https://project.supabase.co"},
}


class DependencyStatusDTO(BaseModel):
    """One checked dependency (currently only the data backend)."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime
    latency_ms: Optional[float] = Field(
        default=None, description="Health check round trip"
    )
    details: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"json_schema_extra": {"example": _BACKEND_EXAMPLE}}

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


def _dependencies(items: List[DependencyStatus]) -> List[DependencyStatusDTO]:
    return [DependencyStatusDTO.from_domain(item) for item in items]


class SystemHealthDTO(BaseModel):
    """Overall status plus the per-dependency breakdown."""

    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {"status": "up", "dependencies": [_BACKEND_EXAMPLE]}
        }
    }

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(status=health.status, dependencies=_dependencies(health.dependencies))


class ApplicationInfoDTO(SystemHealthDTO):
    """Build metadata and uptime on top of the health snapshot."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    extras: Dict[str, Any] = Field(
        default_factory=dict,
        description="Forecast parameters and the (redacted) data backend URL",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "ERP Insights",
                "description": "Sales forecasting and business insights",
                "version": "1.0.0",
                "environment": "production",
                "git_commit": "abcdef1",
                "build_time": "2024-09-09T11:30:00Z",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "up",
                "dependencies": [_BACKEND_EXAMPLE],
                "extras": {
                    "forecast": {"min_days": 7, "horizon_days": 7, "timezone": "UTC"},
                    "data_backend": {"url": "https://project.supabase.co"},
                },
            }
        }
    }

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            dependencies=_dependencies(info.dependencies),
            extras=info.extras,
        )
