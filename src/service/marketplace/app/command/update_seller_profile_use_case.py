from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidInputError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.marketplace.domain.entity.seller_entity import (
    SELLER_NOT_FOUND_MESSAGE,
    SellerEntity,
)


class UpdateSellerProfileUseCase:
    """Partial profile edit; the password can never be changed through this path"""

    def __init__(self, seller_command_repo: ISellerCommandRepo) -> None:
        self.seller_command_repo = seller_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        seller_command_repo: ISellerCommandRepo = Depends(Provide[Container.seller_command_repo]),
    ) -> Self:
        return cls(seller_command_repo=seller_command_repo)

    @Logger.io
    async def execute(
        self,
        *,
        seller_id: int,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> SellerEntity:
        candidates = {'full_name': full_name, 'email': email, 'phone': phone}
        changes = {column: value for column, value in candidates.items() if value}
        if not changes:
            raise InvalidInputError('No valid fields to update')

        seller = await self.seller_command_repo.update_profile(seller_id=seller_id, changes=changes)
        if not seller:
            raise NotFoundError(SELLER_NOT_FOUND_MESSAGE)

        Logger.base.info(f'✏️ [PROFILE] Seller {seller_id} updated: {", ".join(changes)}')
        return seller
