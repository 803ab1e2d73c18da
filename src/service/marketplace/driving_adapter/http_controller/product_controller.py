from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.create_product_use_case import CreateProductUseCase
from src.service.marketplace.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.marketplace.app.command.update_product_use_case import UpdateProductUseCase
from src.service.marketplace.app.query.seller_product_query_use_case import (
    SellerProductQueryUseCase,
)
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal
from src.service.marketplace.driving_adapter.http_controller.auth.seller_auth import (
    get_current_seller,
)
from src.service.marketplace.driving_adapter.http_controller.schema.product_schema import (
    CreateProductRequest,
    ProductData,
    ProductEnvelopeResponse,
    ProductListData,
    ProductListResponse,
    ProductResponse,
    UpdateProductRequest,
)


router = APIRouter()


def to_product_response(product: ProductEntity) -> ProductResponse:
    return ProductResponse(
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
    )


@router.get('', response_model=ProductListResponse)
@Logger.io
async def list_seller_products(
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: SellerProductQueryUseCase = Depends(SellerProductQueryUseCase.depends),
) -> ProductListResponse:
    products = await use_case.list_products(seller_id=current_seller.id)
    return ProductListResponse(
        results=len(products),
        data=ProductListData(products=[to_product_response(p) for p in products]),
    )


@router.post('', response_model=ProductEnvelopeResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: CreateProductRequest,
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductEnvelopeResponse:
    product = await use_case.execute(
        principal=current_seller,
        name=request.name,
        price=request.price,
        description=request.description,
        image=request.image,
        image_url=request.image_url,
        aesthetic=request.aesthetic,
    )
    return ProductEnvelopeResponse(data=ProductData(product=to_product_response(product)))


@router.get('/{product_id}', response_model=ProductEnvelopeResponse)
@Logger.io
async def get_seller_product(
    product_id: int,
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: SellerProductQueryUseCase = Depends(SellerProductQueryUseCase.depends),
) -> ProductEnvelopeResponse:
    product = await use_case.get_product(product_id=product_id, seller_id=current_seller.id)
    return ProductEnvelopeResponse(data=ProductData(product=to_product_response(product)))


@router.patch('/{product_id}', response_model=ProductEnvelopeResponse)
@Logger.io
async def update_product(
    product_id: int,
    request: UpdateProductRequest,
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: UpdateProductUseCase = Depends(UpdateProductUseCase.depends),
) -> ProductEnvelopeResponse:
    product = await use_case.execute(
        product_id=product_id,
        seller_id=current_seller.id,
        name=request.name,
        price=request.price,
        description=request.description,
        image_url=request.image_url,
        aesthetic=request.aesthetic,
        status=request.status,
        sold_at=request.sold_at,
        sold_at_provided=request.sold_at_provided,
    )
    return ProductEnvelopeResponse(data=ProductData(product=to_product_response(product)))


@router.delete(
    '/{product_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
@Logger.io
async def delete_product(
    product_id: int,
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> Response:
    await use_case.execute(product_id=product_id, seller_id=current_seller.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
