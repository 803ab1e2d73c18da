from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal


class ISellerQueryRepo(ABC):
    """Seller Query Repository Abstract Interface - Handles read operations"""

    @abstractmethod
    async def get_by_id(self, *, seller_id: int) -> Optional[SellerEntity]:
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[SellerEntity]:
        """Includes the password hash; only the login path should call this"""
        pass

    @abstractmethod
    async def get_principal_by_id(self, *, seller_id: int) -> Optional[SellerPrincipal]:
        pass
