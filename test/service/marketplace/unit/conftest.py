"""
Unit test configuration for the marketplace service.

Unit tests never start the app; they drive repositories through the
fake asyncpg pool below and use cases through AsyncMock repositories.
"""

import pytest

from test.service.marketplace.unit.helpers import FakeConnection, FakePool


@pytest.fixture
def fake_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def fake_pool(fake_conn: FakeConnection) -> FakePool:
    return FakePool(fake_conn)
