"""Plain configuration structures used by application use cases."""

from .system_info import ForecastOptions, SystemInfo

__all__ = ["SystemInfo", "ForecastOptions"]
