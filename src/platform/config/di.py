"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.database.orm_db_setting import Database
from src.service.marketplace.driven_adapter.repo.product_command_repo_impl import (
    ProductCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.product_query_repo_impl import (
    ProductQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.seller_command_repo_impl import (
    SellerCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.seller_query_repo_impl import SellerQueryRepoImpl
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.marketplace.driven_adapter.state.schema_capability_provider_impl import (
    SchemaCapabilityProviderImpl,
)
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (SQLAlchemy sessions for sellers, asyncpg pool for products)
    database = providers.Singleton(Database)
    asyncpg_pool_provider = providers.Object(get_asyncpg_pool)

    # Schema capabilities (resolved in lifespan, shared by every product query)
    schema_capability_provider = providers.Singleton(
        SchemaCapabilityProviderImpl,
        pool_provider=asyncpg_pool_provider,
        ttl_seconds=config_service.provided.SCHEMA_CAPABILITY_TTL_SECONDS,
    )

    # Repositories (stateless - use session_factory / pool per call)
    seller_query_repo = providers.Singleton(
        SellerQueryRepoImpl, session_factory=database.provided.session
    )
    seller_command_repo = providers.Singleton(
        SellerCommandRepoImpl, session_factory=database.provided.session
    )
    product_query_repo = providers.Singleton(
        ProductQueryRepoImpl,
        schema_capability_provider=schema_capability_provider,
        pool_provider=asyncpg_pool_provider,
    )
    product_command_repo = providers.Singleton(
        ProductCommandRepoImpl,
        schema_capability_provider=schema_capability_provider,
        pool_provider=asyncpg_pool_provider,
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
