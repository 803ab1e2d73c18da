from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel
from src.service.marketplace.driven_adapter.repo.seller_model_mapper import (
    seller_model_to_entity,
)


class SellerQueryRepoImpl(ISellerQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, seller_id: int) -> Optional[SellerEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(SellerModel).where(SellerModel.id == seller_id))
            seller_model = result.scalar_one_or_none()

            if not seller_model:
                return None

            return seller_model_to_entity(seller_model)

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[SellerEntity]:
        # Exact match: emails are compared as stored, no case folding
        async with self.session_factory() as session:
            result = await session.execute(select(SellerModel).where(SellerModel.email == email))
            seller_model = result.scalar_one_or_none()

            if not seller_model:
                return None

            return seller_model_to_entity(seller_model, include_password=True)

    @Logger.io
    async def get_principal_by_id(self, *, seller_id: int) -> Optional[SellerPrincipal]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SellerModel.id, SellerModel.email).where(SellerModel.id == seller_id)
            )
            row = result.one_or_none()

            if row is None:
                return None

            return SellerPrincipal(id=row.id, email=row.email)
