from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.register_seller_use_case import RegisterSellerUseCase
from src.service.marketplace.app.command.update_seller_profile_use_case import (
    UpdateSellerProfileUseCase,
)
from src.service.marketplace.app.query.authenticate_seller_use_case import (
    AuthenticateSellerUseCase,
)
from src.service.marketplace.app.query.seller_query_use_case import SellerQueryUseCase
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.marketplace.driving_adapter.http_controller.auth.seller_auth import (
    get_current_seller,
)
from src.service.marketplace.driving_adapter.http_controller.schema.seller_schema import (
    LoginRequest,
    RegisterSellerRequest,
    SellerAuthData,
    SellerAuthResponse,
    SellerData,
    SellerEnvelopeResponse,
    SellerResponse,
    UpdateSellerProfileRequest,
)


# === API Router ===

router = APIRouter()


def to_seller_response(seller: SellerEntity) -> SellerResponse:
    return SellerResponse(
        id=seller.id or 0,
        full_name=seller.full_name,
        email=seller.email,
        phone=seller.phone,
        created_at=seller.created_at,
        updated_at=seller.updated_at,
    )


@router.post('/register', response_model=SellerAuthResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def register(
    request: RegisterSellerRequest,
    use_case: RegisterSellerUseCase = Depends(RegisterSellerUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> SellerAuthResponse:
    seller = await use_case.execute(
        full_name=request.full_name,
        email=request.email,
        phone=request.phone,
        password=request.password,
        confirm_password=request.confirm_password,
    )
    token = jwt_auth.create_jwt_token(seller.to_principal())

    return SellerAuthResponse(data=SellerAuthData(seller=to_seller_response(seller), token=token))


@router.post('/login', response_model=SellerAuthResponse)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    use_case: AuthenticateSellerUseCase = Depends(AuthenticateSellerUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> SellerAuthResponse:
    seller = await use_case.execute(email=request.email, password=request.password)
    token = jwt_auth.create_jwt_token(seller.to_principal())

    return SellerAuthResponse(data=SellerAuthData(seller=to_seller_response(seller), token=token))


@router.get('/profile', response_model=SellerEnvelopeResponse)
@Logger.io
async def get_profile(
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: SellerQueryUseCase = Depends(SellerQueryUseCase.depends),
) -> SellerEnvelopeResponse:
    seller = await use_case.get_by_id(seller_id=current_seller.id)
    return SellerEnvelopeResponse(data=SellerData(seller=to_seller_response(seller)))


@router.patch('/profile', response_model=SellerEnvelopeResponse)
@Logger.io
async def update_profile(
    request: UpdateSellerProfileRequest,
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: UpdateSellerProfileUseCase = Depends(UpdateSellerProfileUseCase.depends),
) -> SellerEnvelopeResponse:
    seller = await use_case.execute(
        seller_id=current_seller.id,
        full_name=request.full_name,
        email=request.email,
        phone=request.phone,
    )
    return SellerEnvelopeResponse(data=SellerData(seller=to_seller_response(seller)))


@router.get('/{seller_id:int}', response_model=SellerResponse)
@Logger.io
async def get_seller_by_id(
    seller_id: int,
    current_seller: SellerPrincipal = Depends(get_current_seller),
    use_case: SellerQueryUseCase = Depends(SellerQueryUseCase.depends),
) -> SellerResponse:
    """Bare seller object, not wrapped in the envelope"""
    seller = await use_case.get_by_id(seller_id=seller_id)
    return to_seller_response(seller)
