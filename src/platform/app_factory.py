"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import EVENT_BASE, TICKET_BASE, USER_BASE
from src.platform.database.orm_db_setting import get_engine
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.ticketing.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from src.service.ticketing.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)
from src.service.ticketing.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Ticket Issuance System',
    service_name: str = 'ticketing-service',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

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

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(user_router, prefix=USER_BASE, tags=['user'])
    app.include_router(event_router, prefix=EVENT_BASE, tags=['event'])
    app.include_router(ticket_router, prefix=TICKET_BASE, tags=['ticket'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> JSONResponse:
        """Liveness plus a round trip to the ticket database."""
        try:
            async with get_engine().connect() as conn:
                await conn.execute(text('SELECT 1'))
        except SQLAlchemyError as e:
            Logger.base.error(f'💔 [HEALTH] Database unreachable: {e}')
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={'status': 'unhealthy', 'service': settings.PROJECT_NAME, 'database': 'down'},
            )
        return JSONResponse(
            content={'status': 'healthy', 'service': settings.PROJECT_NAME, 'database': 'up'}
        )

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
