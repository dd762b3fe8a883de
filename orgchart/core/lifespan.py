"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; only wiring of
infrastructure (database engine dispose), no business logic.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from orgchart.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup, yield, then dispose the SQL engine if one was created."""
    settings = get_settings()
    if not settings.database_url:
        logger.warning(
            "DATABASE_URL is not set; people and hierarchy endpoints will return 503"
        )
    logger.info("%s %s starting", settings.app_name, settings.app_version)

    yield

    from orgchart.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
