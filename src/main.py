"""
Production FastAPI Application

Serve with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticketing Service] Starting up...')

    tracing = TracingConfig(service_name='ticketing-service')
    tracing.setup()
    Logger.base.info('📊 [Ticketing Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketing Service] Dependency injection wired')

    engine = get_engine()
    tracing.instrument_sqlalchemy(engine=engine)

    # PostgreSQL schema is owned by alembic; SQLite files are created on the fly
    if settings.IS_SQLITE:
        await create_db_and_tables()

    Logger.base.info('✅ [Ticketing Service] Startup complete')

    yield

    Logger.base.info('🛑 [Ticketing Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Ticketing Service] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Ticketing Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
