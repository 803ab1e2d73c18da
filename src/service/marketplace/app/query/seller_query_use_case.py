from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.marketplace.domain.entity.seller_entity import (
    SELLER_NOT_FOUND_MESSAGE,
    SellerEntity,
)


class SellerQueryUseCase:
    """Seller lookups for the profile page, the seller-by-id route and public seller info"""

    def __init__(self, seller_query_repo: ISellerQueryRepo) -> None:
        self.seller_query_repo = seller_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
    ) -> Self:
        return cls(seller_query_repo=seller_query_repo)

    @Logger.io
    async def get_by_id(self, *, seller_id: int) -> SellerEntity:
        seller = await self.seller_query_repo.get_by_id(seller_id=seller_id)
        if not seller:
            raise NotFoundError(SELLER_NOT_FOUND_MESSAGE)
        return seller
