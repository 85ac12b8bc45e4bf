"""
Sale Repository Interface

This module defines the read contract the engine needs from the sales
store. Implementations are expected to scope results to the caller.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.sales import SaleRecord, SaleStatus


class ISaleRepository(ABC):
    """Interface for Sale repository implementations."""

    @abstractmethod
    async def find_all(
        self,
        status: Optional[SaleStatus] = None,
        access_token: Optional[str] = None,
    ) -> List[SaleRecord]:
        """
        Find sales, optionally filtered by status.

        Args:
            status: Only return sales in this state (all states when None)
            access_token: Caller's bearer token, forwarded to the backend

        Returns:
            List of sale records

        Raises:
            DataBackendError: When the backend request fails
        """
        pass
