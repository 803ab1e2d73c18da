"""
Product Command Repository Implementation

Owner-scoped writes on a raw asyncpg connection. Update runs as one
transaction: the row is locked with SELECT ... FOR UPDATE so concurrent
edits of the same product serialize, then only the supplied fields are
written. Driver errors are translated by SQLSTATE after rollback.
"""

from typing import Any, NoReturn

import asyncpg

from src.platform.database.asyncpg_setting import PoolProvider, get_asyncpg_pool
from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    InternalError,
    InvalidInputError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.app.interface.i_schema_capability_provider import (
    ISchemaCapabilityProvider,
)
from src.service.marketplace.domain.entity.product_entity import (
    PRODUCT_NOT_FOUND_MESSAGE,
    ProductEntity,
)
from src.service.marketplace.domain.enum.product_status import (
    PUBLIC_VIEW_STATUS_FALLBACK,
    SELLER_VIEW_STATUS_FALLBACK,
    ProductStatus,
)
from src.service.marketplace.domain.product_update_domain import (
    ProductChangeSet,
    build_update_assignments,
)
from src.service.marketplace.driven_adapter.repo.product_row_mapper import row_to_product


UNIQUE_VIOLATION = '23505'
FOREIGN_KEY_VIOLATION = '23503'
INVALID_TEXT_REPRESENTATION = '22P02'


def raise_translated_db_error(error: Exception, *, fallback_message: str) -> NoReturn:
    """Re-raise a driver error as the matching domain error; domain errors pass through"""
    if isinstance(error, CustomBaseError):
        raise error

    sqlstate = getattr(error, 'sqlstate', None)
    if sqlstate == UNIQUE_VIOLATION:
        raise ConflictError('A product with this name already exists', details=str(error)) from error
    if sqlstate == FOREIGN_KEY_VIOLATION:
        raise InvalidInputError('Invalid reference in product data', details=str(error)) from error
    if sqlstate == INVALID_TEXT_REPRESENTATION:
        raise InvalidInputError('Invalid data format', details=str(error)) from error

    raise InternalError(fallback_message, details=str(error)) from error


class ProductCommandRepoImpl(IProductCommandRepo):
    def __init__(
        self,
        *,
        schema_capability_provider: ISchemaCapabilityProvider,
        pool_provider: PoolProvider = get_asyncpg_pool,
    ) -> None:
        self.schema_capability_provider = schema_capability_provider
        self.pool_provider = pool_provider

    @Logger.io
    async def create(self, *, product: ProductEntity) -> ProductEntity:
        capabilities = await self.schema_capability_provider.current()

        columns = ['name', 'price', 'description', 'image_url', 'aesthetic', 'seller_id']
        values: list[Any] = [
            product.name,
            float(product.price),
            product.description,
            product.image_url,
            product.aesthetic,
            product.seller_id,
        ]
        if capabilities.has_status:
            columns.append('status')
            values.append(ProductStatus.AVAILABLE.value)

        placeholders = [f'${i}' for i in range(1, len(values) + 1)]
        columns.append('created_at')
        placeholders.append('NOW()')
        if capabilities.has_updated_at:
            columns.append('updated_at')
            placeholders.append('NOW()')

        try:
            async with (await self.pool_provider()).acquire() as conn:
                row = await conn.fetchrow(
                    f"""
                    INSERT INTO products ({', '.join(columns)})
                    VALUES ({', '.join(placeholders)})
                    RETURNING *
                    """,
                    *values,
                )
        except asyncpg.PostgresError as e:
            raise_translated_db_error(e, fallback_message='Failed to create product')

        if not row:
            raise InternalError('Failed to create product')

        Logger.base.info(f'🛍️ [PRODUCT] Created product {row["id"]} for seller {product.seller_id}')
        return row_to_product(row, status_fallback=PUBLIC_VIEW_STATUS_FALLBACK)

    @Logger.io
    async def update(
        self, *, product_id: int, seller_id: int, change_set: ProductChangeSet
    ) -> ProductEntity:
        async with (await self.pool_provider()).acquire() as conn:
            tr = conn.transaction()
            await tr.start()
            try:
                capabilities = await self.schema_capability_provider.current()

                locked_row = await conn.fetchrow(
                    'SELECT * FROM products WHERE id = $1 AND seller_id = $2 FOR UPDATE',
                    product_id,
                    seller_id,
                )
                if not locked_row:
                    raise NotFoundError(PRODUCT_NOT_FOUND_MESSAGE)

                assignments = build_update_assignments(
                    change_set=change_set, capabilities=capabilities
                )
                if not assignments:
                    await tr.commit()
                    Logger.base.info(f'🛍️ [PRODUCT] No changes for product {product_id}')
                    return row_to_product(locked_row, status_fallback=SELLER_VIEW_STATUS_FALLBACK)

                set_clauses = [
                    f'{column} = ${index}' for index, (column, _) in enumerate(assignments, start=1)
                ]
                if capabilities.has_updated_at:
                    set_clauses.append('updated_at = NOW()')
                params = [value for _, value in assignments]
                id_index = len(params) + 1

                updated_row = await conn.fetchrow(
                    f"""
                    UPDATE products
                    SET {', '.join(set_clauses)}
                    WHERE id = ${id_index} AND seller_id = ${id_index + 1}
                    RETURNING *
                    """,
                    *params,
                    product_id,
                    seller_id,
                )
                if not updated_row:
                    raise InternalError('Failed to update product: update affected no rows')

                await tr.commit()
            except Exception as e:
                try:
                    await tr.rollback()
                except Exception as rollback_error:
                    Logger.base.error(
                        f'❌ [PRODUCT] Rollback failed for product {product_id}: {rollback_error}'
                    )
                raise_translated_db_error(e, fallback_message='Failed to update product')

        Logger.base.info(
            f'🛍️ [PRODUCT] Updated product {product_id}: '
            f'{", ".join(column for column, _ in assignments)}'
        )
        return row_to_product(updated_row, status_fallback=SELLER_VIEW_STATUS_FALLBACK)

    @Logger.io
    async def delete(self, *, product_id: int, seller_id: int) -> bool:
        try:
            async with (await self.pool_provider()).acquire() as conn:
                result = await conn.execute(
                    'DELETE FROM products WHERE id = $1 AND seller_id = $2',
                    product_id,
                    seller_id,
                )
        except asyncpg.PostgresError as e:
            raise_translated_db_error(e, fallback_message='Failed to delete product')

        # asyncpg returns the command tag, e.g. "DELETE 1"
        deleted = result.split()[-1] != '0'
        if deleted:
            Logger.base.info(f'🗑️ [PRODUCT] Deleted product {product_id}')
        return deleted
