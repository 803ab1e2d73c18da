from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.entity.product_entity import PRODUCT_NOT_FOUND_MESSAGE


class DeleteProductUseCase:
    """Hard delete, owner-scoped"""

    def __init__(
        self, product_query_repo: IProductQueryRepo, product_command_repo: IProductCommandRepo
    ) -> None:
        self.product_query_repo = product_query_repo
        self.product_command_repo = product_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
    ) -> Self:
        return cls(product_query_repo=product_query_repo, product_command_repo=product_command_repo)

    @Logger.io
    async def execute(self, *, product_id: int, seller_id: int) -> None:
        try:
            existing = await self.product_query_repo.get_by_seller(
                product_id=product_id, seller_id=seller_id
            )
            if not existing:
                raise NotFoundError(PRODUCT_NOT_FOUND_MESSAGE)

            # Row may vanish between the check and the delete
            if not await self.product_command_repo.delete(
                product_id=product_id, seller_id=seller_id
            ):
                raise NotFoundError(PRODUCT_NOT_FOUND_MESSAGE)
        except CustomBaseError:
            metrics.record_product_mutation(operation='delete', result='rejected')
            raise

        metrics.record_product_mutation(operation='delete', result='success')
