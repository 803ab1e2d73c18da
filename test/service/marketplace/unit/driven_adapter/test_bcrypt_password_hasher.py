from pydantic import SecretStr
import pytest

from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


LONG_PASSWORD = 'correct horse battery staple ' * 3  # 87 bytes


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.mark.unit
class TestBcryptPasswordHasher:
    def test_round_trip(self, password_hasher: BcryptPasswordHasher) -> None:
        hashed = password_hasher.hash_password(plain_password=SecretStr('password123'))

        assert hashed.startswith('$2')
        assert password_hasher.verify_password(
            plain_password=SecretStr('password123'), hashed_password=hashed
        )
        assert not password_hasher.verify_password(
            plain_password=SecretStr('password124'), hashed_password=hashed
        )

    def test_password_longer_than_72_bytes(self, password_hasher: BcryptPasswordHasher) -> None:
        hashed = password_hasher.hash_password(plain_password=SecretStr(LONG_PASSWORD))

        assert password_hasher.verify_password(
            plain_password=SecretStr(LONG_PASSWORD), hashed_password=hashed
        )

    def test_only_first_72_bytes_count(self, password_hasher: BcryptPasswordHasher) -> None:
        prefix = 'a' * 72
        hashed = password_hasher.hash_password(plain_password=SecretStr(prefix + 'first-tail'))

        assert password_hasher.verify_password(
            plain_password=SecretStr(prefix + 'other-tail'), hashed_password=hashed
        )

    def test_multibyte_password_over_limit(
        self, password_hasher: BcryptPasswordHasher
    ) -> None:
        password = 'é' * 40  # 80 bytes in UTF-8

        hashed = password_hasher.hash_password(plain_password=SecretStr(password))

        assert password_hasher.verify_password(
            plain_password=SecretStr(password), hashed_password=hashed
        )

    def test_non_bcrypt_hash_never_verifies(self, password_hasher: BcryptPasswordHasher) -> None:
        assert not password_hasher.verify_password(
            plain_password=SecretStr('password123'), hashed_password='plaintext'
        )
