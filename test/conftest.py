"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules are imported
- A FastAPI TestClient whose lifespan only wires DI (no database, no pools)
- Repository mocks installed as container overrides

Architecture:
- Unit tests (test/**/unit/): pure mocks, no app, no database
- API tests (test/**/api/): TestClient + container overrides
- Integration tests (marked `integration`): real PostgreSQL, skipped when unreachable
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ.setdefault('POSTGRES_DB', 'marketplace_test_db')
    os.environ['ENVIRONMENT'] = 'test'
    os.environ['SECRET_KEY'] = 'test_secret_key'
    os.environ['BCRYPT_ROUNDS'] = '4'  # fast hashing in tests

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('ASYNCPG_POOL_MIN_SIZE', '1')
    os.environ.setdefault('ASYNCPG_POOL_MAX_SIZE', '5')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncIterator, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

from dependency_injector import providers  # noqa: E402
from dotenv import load_dotenv  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.service.marketplace.app.interface.i_product_command_repo import (  # noqa: E402
    IProductCommandRepo,
)
from src.service.marketplace.app.interface.i_product_query_repo import (  # noqa: E402
    IProductQueryRepo,
)
from src.service.marketplace.app.interface.i_seller_command_repo import (  # noqa: E402
    ISellerCommandRepo,
)
from src.service.marketplace.app.interface.i_seller_query_repo import (  # noqa: E402
    ISellerQueryRepo,
)
from src.service.marketplace.domain.value_object.seller_principal import (  # noqa: E402
    SellerPrincipal,
)
from test.constants import TEST_SELLER_EMAIL, TEST_SELLER_ID  # noqa: E402


load_dotenv(Path(__file__).parent.parent / '.env', override=False)


@asynccontextmanager
async def _test_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire DI only; repositories are mocked so no pool is opened"""
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()


@pytest.fixture(scope='session')
def app() -> FastAPI:
    return create_app(lifespan=_test_lifespan, title_suffix=' (Test)')


@pytest.fixture
def seller_query_repo() -> AsyncMock:
    repo = AsyncMock(spec=ISellerQueryRepo)
    repo.get_principal_by_id.return_value = SellerPrincipal(
        id=TEST_SELLER_ID, email=TEST_SELLER_EMAIL
    )
    return repo


@pytest.fixture
def seller_command_repo() -> AsyncMock:
    return AsyncMock(spec=ISellerCommandRepo)


@pytest.fixture
def product_query_repo() -> AsyncMock:
    return AsyncMock(spec=IProductQueryRepo)


@pytest.fixture
def product_command_repo() -> AsyncMock:
    return AsyncMock(spec=IProductCommandRepo)


@pytest.fixture
def client(
    app: FastAPI,
    seller_query_repo: AsyncMock,
    seller_command_repo: AsyncMock,
    product_query_repo: AsyncMock,
    product_command_repo: AsyncMock,
) -> Generator[TestClient, None, None]:
    container.seller_query_repo.override(providers.Object(seller_query_repo))
    container.seller_command_repo.override(providers.Object(seller_command_repo))
    container.product_query_repo.override(providers.Object(product_query_repo))
    container.product_command_repo.override(providers.Object(product_command_repo))

    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        container.seller_query_repo.reset_override()
        container.seller_command_repo.reset_override()
        container.product_query_repo.reset_override()
        container.product_command_repo.reset_override()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = container.jwt_auth().create_jwt_token(
        SellerPrincipal(id=TEST_SELLER_ID, email=TEST_SELLER_EMAIL)
    )
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def seller_payload() -> dict[str, Any]:
    return {
        'fullName': 'Test Seller',
        'email': TEST_SELLER_EMAIL,
        'phone': '+1234567890',
        'password': 'password123',
        'confirmPassword': 'password123',
    }
