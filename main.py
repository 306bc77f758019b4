"""
Task Tracker API: application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.exception_handlers import setup_exception_handlers
from api.middleware import register_middleware
from api.routes import router as api_router
from config.settings import Settings, config
from database.session import configure_database, dispose_engine, init_models

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "httpx", "aiosqlite"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or config
    configure_database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.auto_create_tables:
            await init_models()
        logger.info("%s ready (%s)", settings.app_name, settings.environment)
        yield
        await dispose_engine()

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Multi-tenant task tracking with bearer-token auth.",
        lifespan=lifespan,
    )

    register_middleware(app, settings)
    setup_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
