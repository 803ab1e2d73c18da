from datetime import datetime
import re
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import InvalidInputError
from src.service.marketplace.domain.value_object.seller_principal import SellerPrincipal


EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_PASSWORD_LENGTH = 8

# One message for "no such email" and "wrong password" so accounts cannot be enumerated
INCORRECT_CREDENTIALS_MESSAGE = 'Incorrect email or password'
SELLER_NOT_FOUND_MESSAGE = 'Seller not found'


@attrs.define
class SellerEntity:
    email: str = ''
    full_name: str = ''
    phone: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_principal(self) -> SellerPrincipal:
        if self.id is None:
            raise ValueError('Seller must be persisted before it can be a principal')
        return SellerPrincipal(id=self.id, email=self.email)

    def set_password(self, plain_password: str, password_hasher) -> None:
        """Set password using provided password hasher"""
        from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher

        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    @staticmethod
    def validate_registration(
        *,
        full_name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        password: Optional[str],
        confirm_password: Optional[str],
    ) -> None:
        """Checked in order; the first failing rule is reported"""
        if not all((full_name, email, phone, password, confirm_password)):
            raise InvalidInputError('All fields are required')

        if not EMAIL_PATTERN.match(email or ''):
            raise InvalidInputError('Please provide a valid email address')

        if len(password or '') < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(
                f'Password must be at least {MIN_PASSWORD_LENGTH} characters long'
            )

        if password != confirm_password:
            raise InvalidInputError('Passwords do not match')
