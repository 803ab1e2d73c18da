from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.marketplace.domain.entity.seller_entity import (
    INCORRECT_CREDENTIALS_MESSAGE,
    SellerEntity,
)


class AuthenticateSellerUseCase:
    def __init__(self, seller_query_repo: ISellerQueryRepo, password_hasher: IPasswordHasher) -> None:
        self.seller_query_repo = seller_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(seller_query_repo=seller_query_repo, password_hasher=password_hasher)

    @Logger.io
    async def execute(self, *, email: Optional[str], password: Optional[str]) -> SellerEntity:
        if not email or not password:
            raise InvalidInputError('Please provide email and password')

        seller = await self.seller_query_repo.get_by_email(email=email)
        if not seller or not self.password_hasher.verify_password(
            plain_password=SecretStr(password), hashed_password=seller.hashed_password
        ):
            metrics.record_seller_login(result='rejected')
            raise AuthenticationError(INCORRECT_CREDENTIALS_MESSAGE)

        metrics.record_seller_login(result='success')
        Logger.base.info(f'🔑 [LOGIN] Seller {seller.id} logged in')

        # The hash never leaves this use case
        seller.hashed_password = ''
        return seller
