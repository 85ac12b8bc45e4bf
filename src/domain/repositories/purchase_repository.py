"""Purchase Repository Interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.sales import Purchase


class IPurchaseRepository(ABC):
    """Interface for Purchase repository implementations."""

    @abstractmethod
    async def find_all(self, access_token: Optional[str] = None) -> List[Purchase]:
        pass
