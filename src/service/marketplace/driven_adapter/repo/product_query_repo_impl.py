"""
Product Query Repository Implementation

Raw asyncpg reads. Seller-scoped queries always filter on seller_id, so a
foreign product and a missing product both come back as None.
"""

from typing import List, Optional

from src.platform.database.asyncpg_setting import PoolProvider, get_asyncpg_pool
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.app.interface.i_schema_capability_provider import (
    ISchemaCapabilityProvider,
)
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.enum.product_status import (
    PUBLIC_VIEW_STATUS_FALLBACK,
    SELLER_VIEW_STATUS_FALLBACK,
    ProductStatus,
)
from src.service.marketplace.driven_adapter.repo.product_row_mapper import (
    build_product_select_columns,
    row_to_product,
)


ALL_AESTHETICS = 'all'


class ProductQueryRepoImpl(IProductQueryRepo):
    def __init__(
        self,
        *,
        schema_capability_provider: ISchemaCapabilityProvider,
        pool_provider: PoolProvider = get_asyncpg_pool,
    ) -> None:
        self.schema_capability_provider = schema_capability_provider
        self.pool_provider = pool_provider

    @Logger.io
    async def list_by_seller(self, *, seller_id: int) -> List[ProductEntity]:
        capabilities = await self.schema_capability_provider.current()
        columns = build_product_select_columns(
            capabilities=capabilities, status_fallback=SELLER_VIEW_STATUS_FALLBACK
        )

        async with (await self.pool_provider()).acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {columns}
                FROM products p
                WHERE p.seller_id = $1
                ORDER BY p.created_at DESC
                """,
                seller_id,
            )

        return [row_to_product(row, status_fallback=SELLER_VIEW_STATUS_FALLBACK) for row in rows]

    @Logger.io
    async def get_by_seller(self, *, product_id: int, seller_id: int) -> Optional[ProductEntity]:
        capabilities = await self.schema_capability_provider.current()
        columns = build_product_select_columns(
            capabilities=capabilities, status_fallback=SELLER_VIEW_STATUS_FALLBACK
        )

        async with (await self.pool_provider()).acquire() as conn:
            row = await conn.fetchrow(
                f"""
                SELECT {columns}
                FROM products p
                WHERE p.id = $1 AND p.seller_id = $2
                """,
                product_id,
                seller_id,
            )

        if not row:
            return None

        return row_to_product(row, status_fallback=SELLER_VIEW_STATUS_FALLBACK)

    @Logger.io
    async def list_available(self, *, aesthetic: Optional[str] = None) -> List[ProductEntity]:
        capabilities = await self.schema_capability_provider.current()
        columns = build_product_select_columns(
            capabilities=capabilities, status_fallback=PUBLIC_VIEW_STATUS_FALLBACK
        )

        conditions: list[str] = []
        params: list = []
        if capabilities.has_status:
            params.append(ProductStatus.AVAILABLE.value)
            conditions.append(f'p.status = ${len(params)}')
        if aesthetic and aesthetic != ALL_AESTHETICS:
            params.append(aesthetic)
            conditions.append(f'p.aesthetic = ${len(params)}')
        where_clause = f'WHERE {" AND ".join(conditions)}' if conditions else ''

        async with (await self.pool_provider()).acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {columns},
                       s.full_name AS seller_name,
                       s.phone AS seller_phone,
                       s.email AS seller_email
                FROM products p
                JOIN sellers s ON p.seller_id = s.id
                {where_clause}
                ORDER BY p.created_at DESC
                """,
                *params,
            )

        return [row_to_product(row, status_fallback=PUBLIC_VIEW_STATUS_FALLBACK) for row in rows]

    @Logger.io
    async def get_public(self, *, product_id: int) -> Optional[ProductEntity]:
        """Any status: a sold product stays reachable by direct link"""
        capabilities = await self.schema_capability_provider.current()
        columns = build_product_select_columns(
            capabilities=capabilities, status_fallback=PUBLIC_VIEW_STATUS_FALLBACK
        )

        async with (await self.pool_provider()).acquire() as conn:
            row = await conn.fetchrow(
                f"""
                SELECT {columns},
                       s.full_name AS seller_name,
                       s.phone AS seller_phone,
                       s.email AS seller_email
                FROM products p
                JOIN sellers s ON p.seller_id = s.id
                WHERE p.id = $1
                """,
                product_id,
            )

        if not row:
            return None

        return row_to_product(row, status_fallback=PUBLIC_VIEW_STATUS_FALLBACK)

    @Logger.io
    async def list_aesthetics(self) -> List[str]:
        capabilities = await self.schema_capability_provider.current()

        async with (await self.pool_provider()).acquire() as conn:
            if capabilities.has_status:
                rows = await conn.fetch(
                    """
                    SELECT DISTINCT aesthetic
                    FROM products
                    WHERE status = $1
                    ORDER BY aesthetic
                    """,
                    ProductStatus.AVAILABLE.value,
                )
            else:
                rows = await conn.fetch(
                    'SELECT DISTINCT aesthetic FROM products ORDER BY aesthetic'
                )

        return [row['aesthetic'] for row in rows if row['aesthetic']]
