from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel
from src.service.marketplace.driven_adapter.repo.seller_model_mapper import (
    seller_model_to_entity,
)


EMAIL_IN_USE_MESSAGE = 'Email already in use'
UNIQUE_VIOLATION = '23505'


def _is_unique_violation(error: IntegrityError) -> bool:
    sqlstate = getattr(error.orig, 'sqlstate', None) or getattr(error.orig, 'pgcode', None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    return 'duplicate key' in str(error).lower()


class SellerCommandRepoImpl(ISellerCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, seller: SellerEntity) -> SellerEntity:
        async with self.session_factory() as session:
            seller_model = SellerModel(
                full_name=seller.full_name,
                email=seller.email,
                phone=seller.phone,
                hashed_password=seller.hashed_password,
            )

            session.add(seller_model)
            try:
                await session.commit()
            except IntegrityError as e:
                if _is_unique_violation(e):
                    raise ConflictError(EMAIL_IN_USE_MESSAGE, details=str(e.orig)) from e
                raise
            await session.refresh(seller_model)

            return seller_model_to_entity(seller_model)

    @Logger.io
    async def update_profile(
        self, *, seller_id: int, changes: dict[str, str]
    ) -> Optional[SellerEntity]:
        async with self.session_factory() as session:
            stmt = (
                update(SellerModel)
                .where(SellerModel.id == seller_id)
                .values(**changes, updated_at=func.now())
                .returning(SellerModel)
            )
            try:
                result = await session.execute(stmt)
                seller_model = result.scalar_one_or_none()
                await session.commit()
            except IntegrityError as e:
                if _is_unique_violation(e):
                    raise ConflictError(EMAIL_IN_USE_MESSAGE, details=str(e.orig)) from e
                raise

            if not seller_model:
                return None

            return seller_model_to_entity(seller_model)
