from typing import Any

import pytest

from src.platform.exception.exceptions import InvalidInputError
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


@pytest.fixture
def registration() -> dict[str, Any]:
    return {
        'full_name': 'Test Seller',
        'email': 'seller@test.com',
        'phone': '+1234567890',
        'password': 'password123',
        'confirm_password': 'password123',
    }


@pytest.mark.unit
class TestValidateRegistration:
    def test_valid_registration_passes(self, registration: dict[str, Any]) -> None:
        SellerEntity.validate_registration(**registration)

    @pytest.mark.parametrize(
        'field', ['full_name', 'email', 'phone', 'password', 'confirm_password']
    )
    def test_every_field_is_required(self, registration: dict[str, Any], field: str) -> None:
        registration[field] = ''

        with pytest.raises(InvalidInputError) as exc_info:
            SellerEntity.validate_registration(**registration)

        assert exc_info.value.message == 'All fields are required'

    @pytest.mark.parametrize('email', ['no-at-sign', 'a@b', 'a b@c.com', '@c.com'])
    def test_invalid_email_rejected(self, registration: dict[str, Any], email: str) -> None:
        registration['email'] = email

        with pytest.raises(InvalidInputError) as exc_info:
            SellerEntity.validate_registration(**registration)

        assert exc_info.value.message == 'Please provide a valid email address'

    def test_short_password_rejected(self, registration: dict[str, Any]) -> None:
        registration['password'] = registration['confirm_password'] = 'short'

        with pytest.raises(InvalidInputError) as exc_info:
            SellerEntity.validate_registration(**registration)

        assert exc_info.value.message == 'Password must be at least 8 characters long'

    def test_mismatched_confirmation_rejected(self, registration: dict[str, Any]) -> None:
        registration['confirm_password'] = 'password124'

        with pytest.raises(InvalidInputError) as exc_info:
            SellerEntity.validate_registration(**registration)

        assert exc_info.value.message == 'Passwords do not match'

    def test_short_password_reported_before_mismatch(self, registration: dict[str, Any]) -> None:
        registration['password'] = 'short'
        registration['confirm_password'] = 'different'

        with pytest.raises(InvalidInputError) as exc_info:
            SellerEntity.validate_registration(**registration)

        assert exc_info.value.message == 'Password must be at least 8 characters long'


@pytest.mark.unit
class TestSellerPassword:
    def test_set_password_stores_hash_not_plaintext(self) -> None:
        seller = SellerEntity(email='seller@test.com', full_name='Seller', phone='1')

        seller.set_password('password123', BcryptPasswordHasher(rounds=4))

        assert seller.hashed_password
        assert seller.hashed_password != 'password123'
        assert seller.hashed_password.startswith('$2')

    def test_set_password_requires_hasher_interface(self) -> None:
        seller = SellerEntity()

        with pytest.raises(TypeError):
            seller.set_password('password123', object())

    def test_hash_hidden_from_repr(self) -> None:
        seller = SellerEntity(email='seller@test.com', hashed_password='$2b$secret')

        assert '$2b$secret' not in repr(seller)

    def test_to_principal_requires_persisted_seller(self) -> None:
        with pytest.raises(ValueError):
            SellerEntity(email='seller@test.com').to_principal()

    def test_to_principal_carries_id_and_email(self) -> None:
        principal = SellerEntity(id=3, email='seller@test.com').to_principal()

        assert (principal.id, principal.email) == (3, 'seller@test.com')
