from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.product_update_domain import ProductChangeSet


class IProductCommandRepo(ABC):
    """Product Command Repository Abstract Interface - owner-scoped writes"""

    @abstractmethod
    async def create(self, *, product: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def update(
        self, *, product_id: int, seller_id: int, change_set: ProductChangeSet
    ) -> ProductEntity:
        """Transactional partial update; raises NotFoundError for missing or foreign rows"""
        pass

    @abstractmethod
    async def delete(self, *, product_id: int, seller_id: int) -> bool:
        pass
