from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.domain.entity.product_entity import ProductEntity


class IProductQueryRepo(ABC):
    """Product Query Repository Abstract Interface - Handles read operations"""

    @abstractmethod
    async def list_by_seller(self, *, seller_id: int) -> List[ProductEntity]:
        pass

    @abstractmethod
    async def get_by_seller(self, *, product_id: int, seller_id: int) -> Optional[ProductEntity]:
        pass

    @abstractmethod
    async def list_available(self, *, aesthetic: Optional[str] = None) -> List[ProductEntity]:
        pass

    @abstractmethod
    async def get_public(self, *, product_id: int) -> Optional[ProductEntity]:
        pass

    @abstractmethod
    async def list_aesthetics(self) -> List[str]:
        pass
