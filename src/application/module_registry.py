from dependency_injector import providers
from src.application.container import Container
from src.domain.trading.trading_module import TradingModule


def register_modules(root_container: Container) -> TradingModule:
    # Register Trading Module
    trading_module = TradingModule(
        root=providers.DependenciesContainer(
            db_client=root_container.db_client,
        ),
    )

    return trading_module
