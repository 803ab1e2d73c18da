"""API test fixtures: entities the mocked repositories hand back"""

from datetime import datetime, timezone

import pytest

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from test.constants import (
    TEST_PRODUCT_ID,
    TEST_SELLER_EMAIL,
    TEST_SELLER_ID,
    TEST_SELLER_NAME,
    TEST_SELLER_PHONE,
    VALID_IMAGE,
)


CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def seller_entity() -> SellerEntity:
    return SellerEntity(
        id=TEST_SELLER_ID,
        email=TEST_SELLER_EMAIL,
        full_name=TEST_SELLER_NAME,
        phone=TEST_SELLER_PHONE,
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )


@pytest.fixture
def product_entity() -> ProductEntity:
    return ProductEntity(
        id=TEST_PRODUCT_ID,
        name='Vintage Leather Jacket',
        price=89.99,
        description='Classic black leather jacket',
        image_url=VALID_IMAGE,
        aesthetic='noir',
        seller_id=TEST_SELLER_ID,
        status='available',
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
