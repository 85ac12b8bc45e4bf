"""Product Repository Interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.sales import Product


class IProductRepository(ABC):
    """Interface for Product repository implementations."""

    @abstractmethod
    async def find_all(self, access_token: Optional[str] = None) -> List[Product]:
        """
        Return the product catalog in its stored order.

        Raises:
            DataBackendError: When the backend request fails
        """
        pass
