from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidTokenError,
)
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


NOT_LOGGED_IN_MESSAGE = 'You are not logged in! Please log in to get access.'
SELLER_GONE_MESSAGE = 'The seller belonging to this token no longer exists.'

# auto_error=False: a missing header must produce our envelope, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_seller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
) -> SellerPrincipal:
    """
    Resolve the seller behind the bearer token

    One store lookup per request so a deleted seller's token stops working
    immediately; nothing is cached.
    """
    if not credentials or not credentials.credentials:
        metrics.record_auth_rejection(reason='missing_token')
        raise AuthenticationError(NOT_LOGGED_IN_MESSAGE)

    try:
        claims = jwt_auth.decode_jwt_token(credentials.credentials)
    except ExpiredTokenError:
        metrics.record_auth_rejection(reason='expired_token')
        raise
    except InvalidTokenError:
        metrics.record_auth_rejection(reason='invalid_token')
        raise

    principal = await seller_query_repo.get_principal_by_id(seller_id=claims.id)
    if not principal:
        metrics.record_auth_rejection(reason='unknown_seller')
        raise AuthenticationError(SELLER_GONE_MESSAGE)

    return principal
