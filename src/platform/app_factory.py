"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
Extracts shared configuration to reduce code duplication.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from datetime import datetime, timezone
import time
from typing import Any

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import HEALTH, METRICS, SELLER_BASE, SELLER_PRODUCTS
from src.platform.database.asyncpg_setting import check_database_connection
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.driving_adapter.http_controller.product_controller import (
    router as seller_product_router,
)
from src.service.marketplace.driving_adapter.http_controller.public_controller import (
    router as public_router,
)
from src.service.marketplace.driving_adapter.http_controller.seller_controller import (
    router as seller_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Aesthetic Marketplace - storefront and seller portal API',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers (public first: /api/sellers/{id}/public must win over seller routes)
    app.include_router(public_router, tags=['public'])
    app.include_router(seller_product_router, prefix=SELLER_PRODUCTS, tags=['seller-products'])
    app.include_router(seller_router, prefix=SELLER_BASE, tags=['seller'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""
    started_at = time.monotonic()

    @app.get(HEALTH)
    async def health_check() -> JSONResponse:
        """Health check endpoint for container orchestration (probes the database)."""
        try:
            await check_database_connection()
        except Exception as e:
            Logger.base.error(f'❌ [HEALTH] Database check failed: {e}')
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    'status': 'error',
                    'message': 'Service Unavailable',
                    'database': 'disconnected',
                },
            )

        return JSONResponse(
            content={
                'status': 'ok',
                'timestamp': datetime.now(timezone.utc).isoformat(),
                'uptime': round(time.monotonic() - started_at, 3),
                'database': 'connected',
            }
        )

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
