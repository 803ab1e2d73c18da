#!/usr/bin/env python3
"""
Database Seed Script
Populate test data into the database

Features:
1. Create Seller - one test seller (re-running resets its password)
2. Create Products - replaces that seller's catalog with sample listings

Notes:
- Products go through the same repositories the API uses, so the seeded rows
  respect the deployed schema's optional columns
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import SecretStr
from sqlalchemy import select, update

from src.platform.config.di import container
from src.platform.database.asyncpg_setting import close_all_asyncpg_pools
from src.platform.database.orm_db_setting import dispose_engine, get_session_maker
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.product_update_domain import ProductChangeSet
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel


DEFAULT_PASSWORD = 'password123'
SELLER_EMAIL = 'test2@example.com'


@dataclass
class ProductConfig:
    """Product seed configuration"""
    name: str
    price: float
    description: str
    aesthetic: str
    image_url: str
    sold: bool = False


_UNSPLASH = 'https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=687&q=80'

SAMPLE_PRODUCTS = [
    ProductConfig(
        name='Elegant Black Dress',
        price=89.99,
        description='A beautiful black dress perfect for evening events. Made with high-quality fabric for maximum comfort and style.',
        aesthetic='noir',
        image_url=_UNSPLASH.format('1539109136881-3be0616acf4b'),
    ),
    ProductConfig(
        name='Classic White Shirt',
        price=49.99,
        description='A crisp white shirt for a professional look. Perfect for both office and casual wear.',
        aesthetic='classic',
        image_url=_UNSPLASH.format('1598033129183-c4f50c736f10'),
    ),
    ProductConfig(
        name='Vintage Denim Jacket',
        price=75.50,
        description='A stylish denim jacket with a vintage touch. Great for layering in any season.',
        aesthetic='vintage',
        image_url=_UNSPLASH.format('1605000797499-95a51c5269ae'),
    ),
    ProductConfig(
        name='Summer Floral Dress',
        price=65.99,
        description='Light and airy floral dress perfect for summer days. Features a comfortable fit and beautiful print.',
        aesthetic='floral',
        image_url=_UNSPLASH.format('1563178407-4e0a3d3f3e2e'),
        sold=True,
    ),
    ProductConfig(
        name='Leather Crossbody Bag',
        price=120.00,
        description='Elegant leather crossbody bag for everyday use. Fits all your essentials in style.',
        aesthetic='classic',
        image_url=_UNSPLASH.format('1590874103328-eac38a683ce7'),
    ),
    ProductConfig(
        name='Silk Scarf',
        price=35.99,
        description='Luxurious silk scarf with a beautiful pattern. Perfect for accessorizing any outfit.',
        aesthetic='elegant',
        image_url=_UNSPLASH.format('1591047139829-d91aecb6caea'),
    ),
    ProductConfig(
        name='Wool Beanie',
        price=29.99,
        description='Warm and stylish wool beanie for cold weather. Available in multiple colors.',
        aesthetic='casual',
        image_url=_UNSPLASH.format('1576871337632-b9aef4c17ab9'),
    ),
]


async def create_seller() -> int:
    """Create the test seller, or reset its password when it already exists

    Returns:
        int: seller_id
    """
    print('👤 Creating test seller...')

    password_hasher = container.password_hasher()
    hashed = password_hasher.hash_password(plain_password=SecretStr(DEFAULT_PASSWORD))

    async with get_session_maker()() as session:
        result = await session.execute(
            select(SellerModel.id).where(SellerModel.email == SELLER_EMAIL)
        )
        seller_id = result.scalar_one_or_none()

        if seller_id is not None:
            await session.execute(
                update(SellerModel)
                .where(SellerModel.id == seller_id)
                .values(hashed_password=hashed)
            )
            await session.commit()
            print(f'   ♻️  Reset password for existing seller: ID={seller_id}')
            return seller_id

    seller = SellerEntity(
        email=SELLER_EMAIL, full_name='Test User', phone='+1234567890', hashed_password=hashed
    )
    created = await container.seller_command_repo().create(seller=seller)
    if created.id is None:
        raise RuntimeError('Failed to create seller: ID is None')

    print(f'   ✅ Created seller: ID={created.id}, Email={created.email}')
    print(f'   📧 Credentials: {SELLER_EMAIL} / {DEFAULT_PASSWORD}')
    return created.id


async def create_products(seller_id: int) -> int:
    """Replace the seller's catalog with the sample products"""
    print(f'🛍️ Creating {len(SAMPLE_PRODUCTS)} products...')

    query_repo = container.product_query_repo()
    command_repo = container.product_command_repo()

    for existing in await query_repo.list_by_seller(seller_id=seller_id):
        await command_repo.delete(product_id=existing.id or 0, seller_id=seller_id)

    for config in SAMPLE_PRODUCTS:
        product = await command_repo.create(
            product=ProductEntity(
                name=config.name,
                price=config.price,
                description=config.description,
                image_url=config.image_url,
                aesthetic=config.aesthetic,
                seller_id=seller_id,
            )
        )
        if config.sold:
            product = await command_repo.update(
                product_id=product.id or 0,
                seller_id=seller_id,
                change_set=ProductChangeSet(
                    sold_at=datetime.now(timezone.utc), sold_at_provided=True
                ),
            )
        print(f'   ✅ {product.name} ({product.aesthetic}, {product.status})')

    return len(SAMPLE_PRODUCTS)


async def main():
    print('🌱 Starting database seeding...')
    print('=' * 50)

    try:
        await container.schema_capability_provider().load()
        seller_id = await create_seller()
        await create_products(seller_id)

        print('=' * 50)
        print('✅ Database seeding completed!')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)

    finally:
        await close_all_asyncpg_pools()
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
