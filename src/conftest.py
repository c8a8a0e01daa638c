import logging.config

import pytest
import pytest_asyncio

from src.application.lifecycle import Runtime, lifespan
from src.infrastructure.config.settings import Settings


def pytest_configure(config):
    logging.config.dictConfig(Settings().get_logging_config())


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest_asyncio.fixture
async def runtime(settings):
    """Disposable database + wired modules, torn down after each test."""
    async with lifespan(settings) as rt:
        yield rt


@pytest.fixture
def db_client(runtime: Runtime):
    return runtime.container.db_client()


@pytest.fixture
def trade_service(runtime: Runtime):
    return runtime.trading.trade_service()
