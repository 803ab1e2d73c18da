"""
Test doubles for the asyncpg pool / connection / transaction trio.

Rows are plain dicts: repositories only use `row[...]` and `row.get(...)`,
which asyncpg.Record supports too.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator
from unittest.mock import AsyncMock, MagicMock

from src.service.marketplace.domain.value_object.schema_capabilities import SchemaCapabilities


FULL_SCHEMA = SchemaCapabilities(has_status=True, has_sold_at=True, has_updated_at=True)
LEGACY_SCHEMA = SchemaCapabilities(has_status=False, has_sold_at=False, has_updated_at=False)

CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeConnection:
    def __init__(self) -> None:
        self.fetchrow = AsyncMock()
        self.fetch = AsyncMock(return_value=[])
        self.execute = AsyncMock()
        self.fetchval = AsyncMock()

        self.tr = MagicMock()
        self.tr.start = AsyncMock()
        self.tr.commit = AsyncMock()
        self.tr.rollback = AsyncMock()
        self.transaction = MagicMock(return_value=self.tr)


class FakePool:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        self.acquire_count = 0

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[FakeConnection]:
        self.acquire_count += 1
        yield self.conn


def make_pool_provider(pool: FakePool):
    async def pool_provider() -> FakePool:
        return pool

    return pool_provider


def make_capability_provider(capabilities: SchemaCapabilities = FULL_SCHEMA) -> AsyncMock:
    provider = AsyncMock()
    provider.current.return_value = capabilities
    provider.load.return_value = capabilities
    provider.refresh.return_value = capabilities
    return provider


def product_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        'id': 10,
        'name': 'Vintage Leather Jacket',
        'price': 89.99,
        'description': 'Classic black leather jacket',
        'image_url': 'data:image/png;base64,AAAA',
        'aesthetic': 'noir',
        'seller_id': 1,
        'status': 'available',
        'sold_at': None,
        'created_at': CREATED_AT,
        'updated_at': CREATED_AT,
    }
    row.update(overrides)
    return row


class FakeDbError(Exception):
    """Stands in for a driver error carrying a SQLSTATE"""

    def __init__(self, sqlstate: str, message: str = 'db error') -> None:
        super().__init__(message)
        self.sqlstate = sqlstate
