from decimal import Decimal

import pytest

from src.service.marketplace.domain.value_object.schema_capabilities import SchemaCapabilities
from src.service.marketplace.driven_adapter.repo.product_query_repo_impl import (
    ProductQueryRepoImpl,
)
from test.service.marketplace.unit.helpers import (
    FULL_SCHEMA,
    LEGACY_SCHEMA,
    FakeConnection,
    FakePool,
    make_capability_provider,
    make_pool_provider,
    product_row,
)


def _repo(pool: FakePool, capabilities: SchemaCapabilities = FULL_SCHEMA) -> ProductQueryRepoImpl:
    return ProductQueryRepoImpl(
        schema_capability_provider=make_capability_provider(capabilities),
        pool_provider=make_pool_provider(pool),
    )


def _legacy_row(**overrides) -> dict:
    row = product_row(**overrides)
    del row['updated_at']
    # what postgres returns for the fallback literals in the select list
    return row


@pytest.mark.unit
class TestSellerScopedReads:
    @pytest.mark.asyncio
    async def test_list_by_seller_filters_owner_newest_first(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = [product_row(id=2), product_row(id=1)]

        products = await _repo(fake_pool).list_by_seller(seller_id=1)

        sql, seller_id = fake_conn.fetch.await_args.args
        assert 'WHERE p.seller_id = $1' in sql
        assert 'ORDER BY p.created_at DESC' in sql
        assert seller_id == 1
        assert [p.id for p in products] == [2, 1]

    @pytest.mark.asyncio
    async def test_legacy_schema_reports_published_fallback(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = [_legacy_row(status='published', sold_at=None)]

        products = await _repo(fake_pool, LEGACY_SCHEMA).list_by_seller(seller_id=1)

        sql = fake_conn.fetch.await_args.args[0]
        assert "'published' AS status" in sql
        assert 'NULL AS sold_at' in sql
        assert 'updated_at' not in sql
        assert products[0].status == 'published'
        assert products[0].sold_at is None

    @pytest.mark.asyncio
    async def test_get_by_seller_returns_none_for_foreign_product(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetchrow.return_value = None

        assert await _repo(fake_pool).get_by_seller(product_id=10, seller_id=2) is None
        sql, product_id, seller_id = fake_conn.fetchrow.await_args.args
        assert 'p.id = $1 AND p.seller_id = $2' in sql
        assert (product_id, seller_id) == (10, 2)

    @pytest.mark.asyncio
    async def test_decimal_price_mapped_to_float(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetchrow.return_value = product_row(price=Decimal('89.99'))

        product = await _repo(fake_pool).get_by_seller(product_id=10, seller_id=1)

        assert product is not None
        assert product.price == pytest.approx(89.99)
        assert isinstance(product.price, float)


@pytest.mark.unit
class TestPublicReads:
    @pytest.mark.asyncio
    async def test_list_available_filters_status_and_joins_seller(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = [
            product_row(seller_name='Test Seller', seller_phone='1', seller_email='s@t.com')
        ]

        products = await _repo(fake_pool).list_available()

        sql, *params = fake_conn.fetch.await_args.args
        assert 'JOIN sellers s ON p.seller_id = s.id' in sql
        assert 'p.status = $1' in sql
        assert 'ORDER BY p.created_at DESC' in sql
        assert params == ['available']
        assert products[0].seller_name == 'Test Seller'

    @pytest.mark.asyncio
    async def test_list_available_with_aesthetic_filter(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        await _repo(fake_pool).list_available(aesthetic='noir')

        sql, *params = fake_conn.fetch.await_args.args
        assert 'p.aesthetic = $2' in sql
        assert params == ['available', 'noir']

    @pytest.mark.asyncio
    async def test_list_available_ignores_all_aesthetic(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        await _repo(fake_pool).list_available(aesthetic='all')

        sql, *params = fake_conn.fetch.await_args.args
        assert 'p.aesthetic =' not in sql
        assert params == ['available']

    @pytest.mark.asyncio
    async def test_list_available_without_status_column(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        await _repo(fake_pool, LEGACY_SCHEMA).list_available(aesthetic='noir')

        sql, *params = fake_conn.fetch.await_args.args
        assert "'available' AS status" in sql
        assert 'p.aesthetic = $1' in sql
        assert params == ['noir']

    @pytest.mark.asyncio
    async def test_get_public_returns_any_status(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetchrow.return_value = product_row(status='sold')

        product = await _repo(fake_pool).get_public(product_id=10)

        sql = fake_conn.fetchrow.await_args.args[0]
        assert 'status =' not in sql
        assert product is not None
        assert product.status == 'sold'

    @pytest.mark.asyncio
    async def test_list_aesthetics_drops_empty_values(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = [
            {'aesthetic': 'noir'},
            {'aesthetic': None},
            {'aesthetic': ''},
            {'aesthetic': 'vintage'},
        ]

        assert await _repo(fake_pool).list_aesthetics() == ['noir', 'vintage']
        sql, status = fake_conn.fetch.await_args.args
        assert 'DISTINCT aesthetic' in sql
        assert status == 'available'
