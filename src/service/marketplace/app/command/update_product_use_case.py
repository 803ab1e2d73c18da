from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.product_update_domain import ProductChangeSet


class UpdateProductUseCase:
    def __init__(self, product_command_repo: IProductCommandRepo) -> None:
        self.product_command_repo = product_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
    ) -> Self:
        return cls(product_command_repo=product_command_repo)

    @Logger.io
    async def execute(
        self,
        *,
        product_id: int,
        seller_id: int,
        name: Optional[str] = None,
        price: Optional[float] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        aesthetic: Optional[str] = None,
        status: Optional[str] = None,
        sold_at: Optional[datetime] = None,
        sold_at_provided: bool = False,
    ) -> ProductEntity:
        """
        Partial update of an owned product

        sold_at_provided separates `{"soldAt": null}` (mark available again)
        from a body without soldAt (leave sold state alone).
        """
        change_set = ProductChangeSet(
            name=name,
            price=price,
            description=description,
            image_url=image_url,
            aesthetic=aesthetic,
            status=status,
            sold_at=sold_at,
            sold_at_provided=sold_at_provided,
        )

        try:
            product = await self.product_command_repo.update(
                product_id=product_id, seller_id=seller_id, change_set=change_set
            )
        except CustomBaseError:
            metrics.record_product_mutation(operation='update', result='rejected')
            raise

        metrics.record_product_mutation(operation='update', result='success')
        return product
