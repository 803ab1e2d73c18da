from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.seller_entity import SellerEntity


class ISellerCommandRepo(ABC):
    """Seller Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create(self, *, seller: SellerEntity) -> SellerEntity:
        pass

    @abstractmethod
    async def update_profile(
        self, *, seller_id: int, changes: dict[str, str]
    ) -> Optional[SellerEntity]:
        pass
