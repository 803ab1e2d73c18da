"""Schema Capability Provider - catalog lookup resolved once, cached process-wide"""

import asyncio
import time
from typing import Optional

from src.platform.database.asyncpg_setting import PoolProvider, get_asyncpg_pool
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_schema_capability_provider import (
    ISchemaCapabilityProvider,
)
from src.service.marketplace.domain.value_object.schema_capabilities import (
    OPTIONAL_PRODUCT_COLUMNS,
    SchemaCapabilities,
)


PRODUCTS_TABLE = 'products'


class SchemaCapabilityProviderImpl(ISchemaCapabilityProvider):
    """
    Cache of which optional product columns exist

    Lifecycle:
    - load() at application startup reads information_schema once
    - current() serves the snapshot; with ttl_seconds > 0 a stale snapshot is re-read
    - refresh() re-reads on demand (migrations against a live process)
    """

    def __init__(
        self, *, pool_provider: PoolProvider = get_asyncpg_pool, ttl_seconds: float = 0.0
    ) -> None:
        self.pool_provider = pool_provider
        self._ttl_seconds = ttl_seconds
        self._capabilities: Optional[SchemaCapabilities] = None
        self._lock = asyncio.Lock()

    async def load(self) -> SchemaCapabilities:
        if self._capabilities is None:
            return await self.refresh()
        return self._capabilities

    async def current(self) -> SchemaCapabilities:
        capabilities = self._capabilities
        if capabilities is None:
            return await self.refresh()
        if capabilities.is_stale(now=time.monotonic(), ttl_seconds=self._ttl_seconds):
            return await self.refresh()
        return capabilities

    async def refresh(self) -> SchemaCapabilities:
        async with self._lock:
            async with (await self.pool_provider()).acquire() as conn:
                rows = await conn.fetch(
                    """
                    SELECT column_name
                    FROM information_schema.columns
                    WHERE table_name = $1
                      AND column_name = ANY($2::text[])
                    """,
                    PRODUCTS_TABLE,
                    list(OPTIONAL_PRODUCT_COLUMNS),
                )

            self._capabilities = SchemaCapabilities.from_columns(
                (row['column_name'] for row in rows), resolved_at=time.monotonic()
            )

        Logger.base.info(
            f'🧭 [SCHEMA] products columns: status={self._capabilities.has_status}, '
            f'sold_at={self._capabilities.has_sold_at}, '
            f'updated_at={self._capabilities.has_updated_at}'
        )
        return self._capabilities
