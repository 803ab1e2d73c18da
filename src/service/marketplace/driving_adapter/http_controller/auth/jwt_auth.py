"""
Seller Token Service
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ExpiredTokenError, InvalidTokenError
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal


class JwtAuth:
    def __init__(
        self,
        *,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
    ) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.token_expire_minutes = expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_jwt_token(self, principal: SellerPrincipal) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(principal.id),
            'exp': now + timedelta(minutes=self.token_expire_minutes),
            'iat': now,
            'id': principal.id,
            'email': principal.email,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> SellerPrincipal:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        seller_id = payload.get('id')
        email = payload.get('email')
        if not isinstance(seller_id, int) or not email:
            raise InvalidTokenError()

        return SellerPrincipal(id=seller_id, email=email)
