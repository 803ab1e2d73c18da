"""
Product Row Mapper

Select lists adapt to the deployed schema: a missing `status` column is
replaced by a literal fallback and a missing `sold_at` column by NULL, so
every read returns the same shape regardless of migration level.
"""

from decimal import Decimal
from typing import Any, Mapping

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.value_object.schema_capabilities import SchemaCapabilities


BASE_PRODUCT_COLUMNS = (
    'id',
    'name',
    'price',
    'description',
    'image_url',
    'aesthetic',
    'seller_id',
    'created_at',
)


def build_product_select_columns(
    *, capabilities: SchemaCapabilities, status_fallback: str, alias: str = 'p'
) -> str:
    # status_fallback is one of our own literals, never user input
    columns = [f'{alias}.{column}' for column in BASE_PRODUCT_COLUMNS]
    columns.append(f'{alias}.status' if capabilities.has_status else f"'{status_fallback}' AS status")
    columns.append(f'{alias}.sold_at' if capabilities.has_sold_at else 'NULL AS sold_at')
    if capabilities.has_updated_at:
        columns.append(f'{alias}.updated_at')
    return ', '.join(columns)


def _to_float(value: Any) -> float:
    if isinstance(value, Decimal):
        return float(value)
    return float(value) if value is not None else 0.0


def row_to_product(row: Mapping[str, Any], *, status_fallback: str) -> ProductEntity:
    """Convert an asyncpg Record (or any mapping) to ProductEntity"""
    return ProductEntity(
        id=row['id'],
        name=row['name'],
        price=_to_float(row['price']),
        description=row['description'],
        image_url=row['image_url'],
        aesthetic=row['aesthetic'],
        seller_id=row['seller_id'],
        status=row.get('status') or status_fallback,
        sold_at=row.get('sold_at'),
        created_at=row.get('created_at'),
        updated_at=row.get('updated_at'),
        seller_name=row.get('seller_name'),
        seller_phone=row.get('seller_phone'),
        seller_email=row.get('seller_email'),
    )
