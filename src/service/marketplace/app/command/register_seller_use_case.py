from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.marketplace.domain.entity.seller_entity import SellerEntity


class RegisterSellerUseCase:
    def __init__(
        self, seller_command_repo: ISellerCommandRepo, password_hasher: IPasswordHasher
    ) -> None:
        self.seller_command_repo = seller_command_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        seller_command_repo: ISellerCommandRepo = Depends(Provide[Container.seller_command_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(seller_command_repo=seller_command_repo, password_hasher=password_hasher)

    @Logger.io
    async def execute(
        self,
        *,
        full_name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        password: Optional[str],
        confirm_password: Optional[str],
    ) -> SellerEntity:
        SellerEntity.validate_registration(
            full_name=full_name,
            email=email,
            phone=phone,
            password=password,
            confirm_password=confirm_password,
        )

        # Stored exactly as given: no trimming or case folding of email
        seller = SellerEntity(email=email or '', full_name=full_name or '', phone=phone or '')
        seller.set_password(password or '', self.password_hasher)

        created = await self.seller_command_repo.create(seller=seller)
        Logger.base.info(f'🆕 [REGISTER] Seller {created.id} registered')
        return created
