import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from testcontainers.community.postgres import PostgresContainer

from src.infrastructure.config.settings import Settings, to_async_url

logger = logging.getLogger(__name__)


class DatabaseProvisioningError(RuntimeError):
    """The database instance for a run could not be started."""


@asynccontextmanager
async def postgres_database(settings: Settings) -> AsyncIterator[str]:
    """
    Yield an asyncpg URL for a PostgreSQL database scoped to the block.

    With ``db_url`` configured that database is used as-is. Otherwise a
    disposable container is started and always stopped on exit.
    """
    if settings.uses_external_database:
        logger.info("Using configured PostgreSQL database")
        yield settings.async_database_url
        return

    container = PostgresContainer(settings.postgres_image, driver=None)

    logger.info(f"Starting PostgreSQL container ({settings.postgres_image})...")
    try:
        await asyncio.to_thread(container.start)
    except Exception as e:
        logger.error(f"PostgreSQL container failed to start: {e}")
        # start() may fail after the container is already running
        try:
            await asyncio.to_thread(container.stop)
        except Exception as stop_error:
            logger.error(f"Error stopping PostgreSQL container: {stop_error}")
        raise DatabaseProvisioningError(
            f"Could not start {settings.postgres_image}"
        ) from e

    try:
        url = to_async_url(container.get_connection_url())
        logger.info("PostgreSQL container ready")
        yield url
    finally:
        await asyncio.to_thread(container.stop)
        logger.info("PostgreSQL container stopped")
