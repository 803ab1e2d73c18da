from typing import Optional

from fastapi import APIRouter, Depends

from src.platform.constant.route_constant import (
    PUBLIC_AESTHETICS,
    PUBLIC_PRODUCT_GET,
    PUBLIC_PRODUCTS,
    PUBLIC_SELLER_GET,
)
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.query.public_catalog_use_case import PublicCatalogUseCase
from src.service.marketplace.app.query.seller_query_use_case import SellerQueryUseCase
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.driving_adapter.http_controller.schema.product_schema import (
    AestheticListData,
    AestheticListResponse,
    PublicProductData,
    PublicProductEnvelopeResponse,
    PublicProductListData,
    PublicProductListResponse,
    PublicProductResponse,
)
from src.service.marketplace.driving_adapter.http_controller.schema.seller_schema import (
    SellerData,
    SellerEnvelopeResponse,
)
from src.service.marketplace.driving_adapter.http_controller.seller_controller import (
    to_seller_response,
)


router = APIRouter()


def to_public_product_response(product: ProductEntity) -> PublicProductResponse:
    return PublicProductResponse(
        id=product.id or 0,
        name=product.name,
        price=product.price,
        description=product.description,
        image_url=product.image_url,
        aesthetic=product.aesthetic,
        seller_id=product.seller_id or 0,
        status=product.status,
        sold_at=product.sold_at,
        created_at=product.created_at,
        updated_at=product.updated_at,
        seller_name=product.seller_name,
        seller_phone=product.seller_phone,
        seller_email=product.seller_email,
    )


@router.get(PUBLIC_PRODUCTS, response_model=PublicProductListResponse)
@Logger.io
async def list_products(
    aesthetic: Optional[str] = None,
    use_case: PublicCatalogUseCase = Depends(PublicCatalogUseCase.depends),
) -> PublicProductListResponse:
    products = await use_case.list_products(aesthetic=aesthetic)
    return PublicProductListResponse(
        results=len(products),
        data=PublicProductListData(products=[to_public_product_response(p) for p in products]),
    )


@router.get(PUBLIC_PRODUCT_GET, response_model=PublicProductEnvelopeResponse)
@Logger.io
async def get_product(
    product_id: int,
    use_case: PublicCatalogUseCase = Depends(PublicCatalogUseCase.depends),
) -> PublicProductEnvelopeResponse:
    product = await use_case.get_product(product_id=product_id)
    return PublicProductEnvelopeResponse(
        data=PublicProductData(product=to_public_product_response(product))
    )


@router.get(PUBLIC_AESTHETICS, response_model=AestheticListResponse)
@Logger.io
async def list_aesthetics(
    use_case: PublicCatalogUseCase = Depends(PublicCatalogUseCase.depends),
) -> AestheticListResponse:
    aesthetics = await use_case.list_aesthetics()
    return AestheticListResponse(data=AestheticListData(aesthetics=aesthetics))


@router.get(PUBLIC_SELLER_GET, response_model=SellerEnvelopeResponse)
@Logger.io
async def get_seller_public_info(
    seller_id: int,
    use_case: SellerQueryUseCase = Depends(SellerQueryUseCase.depends),
) -> SellerEnvelopeResponse:
    seller = await use_case.get_by_id(seller_id=seller_id)
    return SellerEnvelopeResponse(data=SellerData(seller=to_seller_response(seller)))
