import time

import attrs
import pytest

from src.service.marketplace.driven_adapter.state.schema_capability_provider_impl import (
    SchemaCapabilityProviderImpl,
)
from test.service.marketplace.unit.helpers import FakeConnection, FakePool, make_pool_provider


def _columns(*names: str) -> list[dict[str, str]]:
    return [{'column_name': name} for name in names]


@pytest.mark.unit
class TestSchemaCapabilityProvider:
    @pytest.mark.asyncio
    async def test_load_reads_information_schema_once(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = _columns('status', 'sold_at', 'updated_at')
        provider = SchemaCapabilityProviderImpl(pool_provider=make_pool_provider(fake_pool))

        first = await provider.load()
        second = await provider.current()

        assert first.has_status and first.has_sold_at and first.has_updated_at
        assert second is first
        assert fake_conn.fetch.await_count == 1
        sql, table, columns = fake_conn.fetch.await_args.args
        assert 'information_schema.columns' in sql
        assert table == 'products'
        assert set(columns) == {'status', 'sold_at', 'updated_at'}

    @pytest.mark.asyncio
    async def test_missing_columns_reported(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = _columns('status')
        provider = SchemaCapabilityProviderImpl(pool_provider=make_pool_provider(fake_pool))

        capabilities = await provider.current()

        assert capabilities.has_status is True
        assert capabilities.has_sold_at is False
        assert capabilities.has_updated_at is False

    @pytest.mark.asyncio
    async def test_refresh_picks_up_new_columns(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.side_effect = [_columns('status'), _columns('status', 'sold_at')]
        provider = SchemaCapabilityProviderImpl(pool_provider=make_pool_provider(fake_pool))

        await provider.load()
        refreshed = await provider.refresh()

        assert refreshed.has_sold_at is True
        assert (await provider.current()).has_sold_at is True

    @pytest.mark.asyncio
    async def test_zero_ttl_never_expires(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = _columns('status')
        provider = SchemaCapabilityProviderImpl(
            pool_provider=make_pool_provider(fake_pool), ttl_seconds=0
        )

        loaded = await provider.load()
        provider._capabilities = attrs.evolve(loaded, resolved_at=time.monotonic() - 86_400)
        await provider.current()

        assert fake_conn.fetch.await_count == 1

    @pytest.mark.asyncio
    async def test_stale_snapshot_is_reloaded_after_ttl(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.side_effect = [_columns('status'), _columns('status', 'updated_at')]
        provider = SchemaCapabilityProviderImpl(
            pool_provider=make_pool_provider(fake_pool), ttl_seconds=60
        )

        loaded = await provider.load()
        provider._capabilities = attrs.evolve(loaded, resolved_at=time.monotonic() - 120)
        capabilities = await provider.current()

        assert capabilities.has_updated_at is True
        assert fake_conn.fetch.await_count == 2

    @pytest.mark.asyncio
    async def test_fresh_snapshot_is_served_within_ttl(
        self, fake_pool: FakePool, fake_conn: FakeConnection
    ) -> None:
        fake_conn.fetch.return_value = _columns('status')
        provider = SchemaCapabilityProviderImpl(
            pool_provider=make_pool_provider(fake_pool), ttl_seconds=3600
        )

        await provider.load()
        await provider.current()

        assert fake_conn.fetch.await_count == 1
