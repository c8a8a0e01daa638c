import pytest
from pydantic import ValidationError

from src.infrastructure.config.settings import Settings, to_async_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@h:5432/d", "postgresql+asyncpg://u:p@h:5432/d"),
        ("postgresql+psycopg://u:p@h:5432/d", "postgresql+asyncpg://u:p@h:5432/d"),
        ("postgresql+psycopg2://u:p@h:5432/d", "postgresql+asyncpg://u:p@h:5432/d"),
        ("postgresql+asyncpg://u:p@h:5432/d", "postgresql+asyncpg://u:p@h:5432/d"),
    ],
)
def test_to_async_url(url, expected):
    assert to_async_url(url) == expected


def test_no_db_url_means_container():
    settings = Settings(db_url=None)

    assert settings.uses_external_database is False
    assert settings.async_database_url is None


def test_db_url_is_rewritten_for_asyncpg():
    settings = Settings(db_url="postgresql://u:p@h:5432/d")

    assert settings.uses_external_database is True
    assert settings.async_database_url == "postgresql+asyncpg://u:p@h:5432/d"


@pytest.mark.parametrize("url", ["", "mysql://u:p@h/d", "sqlite:///trades.db"])
def test_invalid_db_url_is_rejected(url):
    with pytest.raises(ValidationError):
        Settings(db_url=url)


def test_logging_config_follows_db_echo():
    quiet = Settings(db_echo=False).get_logging_config()
    echo = Settings(db_echo=True).get_logging_config()

    assert quiet["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
    assert echo["loggers"]["sqlalchemy.engine"]["level"] == "INFO"
