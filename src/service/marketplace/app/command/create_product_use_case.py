"""
Create Product Use Case

Validation runs in a fixed order and the first failure is reported:
principal, required fields, price sign, image data URI shape, image size.
Nothing touches the store until every check has passed.
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal


class CreateProductUseCase:
    def __init__(
        self,
        product_command_repo: IProductCommandRepo,
        *,
        max_image_bytes: int = settings.MAX_IMAGE_BYTES,
        default_aesthetic: str = settings.DEFAULT_AESTHETIC,
    ) -> None:
        self.product_command_repo = product_command_repo
        self.max_image_bytes = max_image_bytes
        self.default_aesthetic = default_aesthetic

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
        principal: Optional[SellerPrincipal],
        name: Optional[str],
        price: Optional[float],
        description: Optional[str],
        image: Optional[str] = None,
        image_url: Optional[str] = None,
        aesthetic: Optional[str] = None,
    ) -> ProductEntity:
        try:
            if not principal:
                raise AuthenticationError('Authentication required')

            # image_url wins when both are sent
            image_data = image_url or image
            ProductEntity.validate_required_fields(
                name=name, price=price, description=description, image=image_data
            )
            ProductEntity.validate_image_data_uri(image_data or '', max_bytes=self.max_image_bytes)

            product = ProductEntity(
                name=(name or '').strip(),
                price=float(price or 0),
                description=(description or '').strip(),
                image_url=image_data or '',
                aesthetic=aesthetic or self.default_aesthetic,
                seller_id=principal.id,
            )
            created = await self.product_command_repo.create(product=product)
        except CustomBaseError:
            metrics.record_product_mutation(operation='create', result='rejected')
            raise

        metrics.record_product_mutation(operation='create', result='success')
        return created
