"""
Fleet Service - Main Application
Bus registry with per-bus seat diagrams provisioned from diagram templates.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifespan: startup and shutdown"""
    Logger.base.info('🚀 [Fleet Service] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Fleet Service] Dependency injection wired')

    database = container.database()
    if database.is_sqlite:
        # No migrations for local sqlite files; Postgres goes through alembic
        await database.create_tables()
        Logger.base.info('🗄️ [Fleet Service] SQLite schema created')

    Logger.base.info('✅ [Fleet Service] Startup complete')

    yield

    Logger.base.info('🛑 [Fleet Service] Shutting down...')
    container.unwire()
    await cleanup()
    Logger.base.info('👋 [Fleet Service] Shutdown complete')


app = create_app(lifespan=lifespan)
