"""
Test-specific FastAPI Application

Uses the shared app factory; the schema is prepared by conftest before the
session starts.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🧪 [Test App] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    yield

    Logger.base.info('🛑 [Test App] Shutting down...')
    await dispose_engine()
    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan_for_tests,
    title_suffix=' (Test)',
    description='Test Application',
    service_name='test-ticketing-service',
)
