"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.

Data-quality conditions (too little history, empty collections) are not
errors: they are returned as explicit result types. The classes below cover
broken preconditions and failures of the data backend.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InsufficientTrendDataError(DomainError):
    """Raised when a trend model is fitted with fewer than two points."""

    def __init__(self, point_count: int, details: Optional[Dict[str, Any]] = None):
        message = (
            f"A trend model needs at least 2 daily points, got {point_count}"
        )
        super().__init__(message, {"point_count": point_count, **(details or {})})
        self.point_count = point_count


class DataBackendError(DomainError):
    """Raised when the hosted data backend cannot serve a request."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class TrendOverflowError(DomainError):
    """Raised when revenue values are too large for a finite trend fit."""

    def __init__(self, point_count: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Revenue totals over {point_count} days are too large to fit a trend",
            {"point_count": point_count, **(details or {})},
        )
        self.point_count = point_count
