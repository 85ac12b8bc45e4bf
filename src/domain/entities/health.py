"""
Health domain entities.

Value objects reported by ``/health`` and ``/info``. The only external
dependency of the service is the hosted data backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ServiceStatus(str, Enum):
    """Availability of a dependency or of the whole service."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    def dependency(self, name: str) -> Optional[DependencyStatus]:
        return next((dep for dep in self.dependencies if dep.name == name), None)

    @property
    def is_operational(self) -> bool:
        """False only when a dependency is down; degraded still serves data."""
        return self.status != ServiceStatus.DOWN


@dataclass(slots=True)
class ApplicationInfo:
    """Build metadata, uptime and configuration surfaced by ``/info``."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)
