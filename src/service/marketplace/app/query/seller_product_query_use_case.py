from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.entity.product_entity import (
    PRODUCT_NOT_FOUND_MESSAGE,
    ProductEntity,
)


class SellerProductQueryUseCase:
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
    async def list_products(self, *, seller_id: int) -> List[ProductEntity]:
        Logger.base.info(f'📋 [SELLER_PRODUCTS] Loading products for seller {seller_id}')

        products = await self.product_query_repo.list_by_seller(seller_id=seller_id)

        Logger.base.info(f'✅ [SELLER_PRODUCTS] Found {len(products)} products for seller {seller_id}')
        return products

    @Logger.io
    async def get_product(self, *, product_id: int, seller_id: int) -> ProductEntity:
        product = await self.product_query_repo.get_by_seller(
            product_id=product_id, seller_id=seller_id
        )
        if not product:
            raise NotFoundError(PRODUCT_NOT_FOUND_MESSAGE)
        return product
