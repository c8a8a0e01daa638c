from dependency_injector import containers, providers
from src.infrastructure.database.client import PostgresClient
from src.infrastructure.config.settings import Settings


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(Settings)

    # supplied at runtime, once the database has been provisioned
    db_url = providers.Dependency(instance_of=str)

    db_client = providers.Singleton(
        PostgresClient,
        db_url=db_url,
        pool_size=config.provided.db_pool_size,
        max_overflow=config.provided.db_max_overflow,
        pool_timeout=config.provided.db_pool_timeout,
        pool_recycle=config.provided.db_pool_recycle,
        echo=config.provided.db_echo,
    )


def build_container(db_url: str) -> Container:
    return Container(db_url=providers.Object(db_url))
