import bcrypt
from pydantic import SecretStr

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher


# bcrypt only reads the first 72 bytes; bcrypt>=5 raises instead of ignoring the rest
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: SecretStr) -> bytes:
    return plain_password.get_secret_value().encode('utf-8')[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """Concrete bcrypt implementation of IPasswordHasher"""

    def __init__(self, *, rounds: int | None = None) -> None:
        self.rounds = rounds or settings.BCRYPT_ROUNDS

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        """Hash password using bcrypt with SecretStr for security"""
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        """Verify password using bcrypt with SecretStr for security"""
        hashed_bytes = hashed_password.encode('utf-8')
        try:
            return bcrypt.checkpw(_password_bytes(plain_password), hashed_bytes)
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
