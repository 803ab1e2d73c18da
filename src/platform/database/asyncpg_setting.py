import asyncio
from typing import Awaitable, Callable

import asyncpg

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# Repositories receive the pool lazily through this callable (injected by the container)
PoolProvider = Callable[[], Awaitable[asyncpg.Pool]]

# Global connection pools per event loop
asyncpg_pools: dict[int, asyncpg.Pool] = {}


async def get_asyncpg_pool() -> asyncpg.Pool:
    current_loop = asyncio.get_running_loop()
    loop_id = id(current_loop)

    # Fast path: pool already exists for this loop
    if loop_id in asyncpg_pools:
        pool = asyncpg_pools[loop_id]
        Logger.base.debug(
            f'📊 [Pool Stats] size={pool.get_size()}, free={pool.get_idle_size()}, '
            f'max={pool.get_max_size()}, min={pool.get_min_size()}'
        )
        return pool

    # Slow path: create new pool (should only happen at startup)
    # Convert SQLAlchemy URL to asyncpg format
    dsn = settings.DATABASE_URL_ASYNC.replace('postgresql+asyncpg://', 'postgresql://')

    Logger.base.info(
        f'🔗 [DB] Creating asyncpg pool {settings.POSTGRES_SERVER}:{settings.POSTGRES_PORT}'
        f'/{settings.POSTGRES_DB} (user={settings.POSTGRES_USER}, password=***)'
    )
    pool = await asyncpg.create_pool(
        dsn,
        min_size=settings.ASYNCPG_POOL_MIN_SIZE,
        max_size=settings.ASYNCPG_POOL_MAX_SIZE,
        command_timeout=settings.ASYNCPG_POOL_COMMAND_TIMEOUT,
        max_inactive_connection_lifetime=settings.ASYNCPG_POOL_MAX_INACTIVE_LIFETIME,
        timeout=settings.ASYNCPG_POOL_TIMEOUT,
        max_queries=settings.ASYNCPG_POOL_MAX_QUERIES,
    )

    asyncpg_pools[loop_id] = pool

    return asyncpg_pools[loop_id]


async def check_database_connection() -> None:
    """Round-trip a trivial query; raises whatever the driver raises when the DB is down."""
    pool = await get_asyncpg_pool()
    async with pool.acquire() as conn:
        await conn.fetchval('SELECT 1')


async def warmup_asyncpg_pool() -> int:
    """
    Strategy:
    1. Acquire MIN_SIZE connections from pool (blocking)
    2. Release them all back to pool
    3. All connections now in warm pool ready for immediate use

    Fails fast when the database is unreachable, so a broken deployment
    never starts serving.
    """
    pool = await get_asyncpg_pool()
    connections = []

    Logger.base.info(
        f'🔥 [Pool Warmup] Starting warmup (target={settings.ASYNCPG_POOL_MIN_SIZE})...'
    )
    try:
        for i in range(settings.ASYNCPG_POOL_MIN_SIZE):
            try:
                conn = await pool.acquire(timeout=settings.ASYNCPG_POOL_TIMEOUT)
                connections.append(conn)
            except asyncio.TimeoutError:
                Logger.base.warning(f'   ⚠️  Pool warmup timeout at {i + 1} connections')
                break

        if connections:
            now = await connections[0].fetchval('SELECT NOW()')
            Logger.base.info(f'✅ [Pool Warmup] Database time: {now}')
    finally:
        for conn in connections:
            await pool.release(conn)

    Logger.base.info(
        f'✅ [Pool Warmup] Completed: {len(connections)} connections ready '
        f'(size={pool.get_size()}, idle={pool.get_idle_size()})'
    )
    return len(connections)


async def close_all_asyncpg_pools() -> None:
    """
    Close all asyncpg connection pools across all event loops

    Warning: Only call this during application shutdown.
    """
    for _, pool in list(asyncpg_pools.items()):
        try:
            await pool.close()
        except Exception as e:
            Logger.base.warning(f'⚠️  [DB] Error closing asyncpg pool: {e}')
    asyncpg_pools.clear()
