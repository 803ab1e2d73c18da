"""
Production FastAPI Application

Storefront + seller portal API on PostgreSQL.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.asyncpg_setting import (
    close_all_asyncpg_pools,
    get_asyncpg_pool,
    warmup_asyncpg_pool,
)
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Marketplace] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Marketplace] Dependency injection wired')

    # Initialize database
    get_engine()
    Logger.base.info('🗄️  [Marketplace] Database engine ready')

    # Initialize asyncpg connection pool (eager initialization)
    await get_asyncpg_pool()
    Logger.base.info('🏊 [Marketplace] Asyncpg pool initialized')

    # Warmup pool (fail-fast when the database is unreachable)
    await warmup_asyncpg_pool()
    Logger.base.info('🔥 [Marketplace] Asyncpg pool warmed up to MIN_SIZE')

    # Resolve optional product columns once for the whole process
    await container.schema_capability_provider().load()
    Logger.base.info('🧭 [Marketplace] Schema capabilities resolved')

    Logger.base.info('✅ [Marketplace] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Marketplace] Shutting down...')

    # Close asyncpg pools
    await close_all_asyncpg_pools()
    Logger.base.info('🏊 [Marketplace] Asyncpg pools closed')

    # Dispose SQLAlchemy engine
    await dispose_engine()
    Logger.base.info('🗄️  [Marketplace] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Marketplace] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
