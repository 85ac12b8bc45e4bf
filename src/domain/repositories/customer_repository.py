"""Customer Repository Interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.sales import Customer


class ICustomerRepository(ABC):
    """Interface for Customer repository implementations."""

    @abstractmethod
    async def find_all(self, access_token: Optional[str] = None) -> List[Customer]:
        pass
