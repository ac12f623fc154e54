"""
Production FastAPI Application

Serve with: granian --interface asgi src.main:app
Apply migrations first: storefront-migrate
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engines, get_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Storefront] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Storefront] Dependency injection wired')

    engine = get_engine()
    Logger.base.info(f'🗄️  [Storefront] Database engine ready ({engine.url.get_backend_name()})')

    yield

    Logger.base.info('🛑 [Storefront] Shutting down...')

    await dispose_engines()
    Logger.base.info('🗄️  [Storefront] Database engines disposed')

    container.unwire()

    Logger.base.info('👋 [Storefront] Shutdown complete')


app = create_app(lifespan=lifespan)
