import json
from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Aesthetic Marketplace'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    ENVIRONMENT: str = 'development'  # 'production' hides error details

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ALGORITHM: str = 'HS256'
    BCRYPT_ROUNDS: int = 10

    # CORS (NoDecode: a comma-separated value reaches the validator as the raw string)
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ['http://localhost:5173']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'marketplace'

    # SQLAlchemy pool (seller reads/writes)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 5  # seconds to wait for a connection
    DB_POOL_RECYCLE: int = 1800
    DB_POOL_PRE_PING: bool = True

    # asyncpg pool (product SQL)
    ASYNCPG_POOL_MIN_SIZE: int = 2
    ASYNCPG_POOL_MAX_SIZE: int = 20
    ASYNCPG_POOL_TIMEOUT: float = 5.0  # connect timeout (seconds)
    ASYNCPG_POOL_COMMAND_TIMEOUT: float = 30.0
    ASYNCPG_POOL_MAX_INACTIVE_LIFETIME: float = 30.0  # idle connection reap (seconds)
    ASYNCPG_POOL_MAX_QUERIES: int = 50000

    # Product rules
    MAX_IMAGE_BYTES: int = 2 * 1024 * 1024
    DEFAULT_AESTHETIC: str = 'noir'

    # Optional-column detection; 0 keeps the startup snapshot until refresh()
    SCHEMA_CAPABILITY_TTL_SECONDS: float = 0.0

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.ENVIRONMENT.lower() == 'production'

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD.get_secret_value()}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )


settings = Settings()  # type: ignore
