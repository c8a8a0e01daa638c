from contextlib import asynccontextmanager
from dataclasses import dataclass
import logging
from typing import AsyncIterator
from src.application.container import Container, build_container
from src.application.module_registry import register_modules
from src.domain.trading.trading_module import TradingModule
from src.infrastructure.config.settings import Settings
from src.infrastructure.database.provisioning import postgres_database

logger = logging.getLogger(__name__)


@dataclass
class Runtime:
    container: Container
    trading: TradingModule


@asynccontextmanager
async def lifespan(settings: Settings) -> AsyncIterator[Runtime]:
    logger.info("Starting runtime...")

    async with postgres_database(settings) as db_url:
        container = build_container(db_url)
        db_client = container.db_client()

        try:
            # 1) Database first: connection + schema
            await db_client.init()
            logger.info("Database initialized successfully")

            # 2) Feature modules
            trading = register_modules(container)

            yield Runtime(container=container, trading=trading)

        except Exception as e:
            logger.error(f"Error during runtime: {str(e)}")
            raise

        finally:
            logger.info("Shutting down runtime...")
            await db_client.close()
            logger.info("Runtime shut down successfully")
