from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity


class PublicCatalogUseCase:
    """Unauthenticated storefront reads"""

    def __init__(self, product_query_repo: IProductQueryRepo) -> None:
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo)

    @Logger.io
    async def list_products(self, *, aesthetic: Optional[str] = None) -> List[ProductEntity]:
        Logger.base.info(f'🌟 [CATALOG] Loading available products (aesthetic={aesthetic or "all"})')

        products = await self.product_query_repo.list_available(aesthetic=aesthetic)

        Logger.base.info(f'✅ [CATALOG] Found {len(products)} available products')
        return products

    @Logger.io
    async def get_product(self, *, product_id: int) -> ProductEntity:
        product = await self.product_query_repo.get_public(product_id=product_id)
        if not product:
            raise NotFoundError('Product not found')
        return product

    @Logger.io
    async def list_aesthetics(self) -> List[str]:
        return await self.product_query_repo.list_aesthetics()
