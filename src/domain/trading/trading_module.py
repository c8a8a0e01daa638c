from dependency_injector import containers, providers
from .trade_service import TradeService


class TradingModule(containers.DeclarativeContainer):
    root = providers.DependenciesContainer()

    trade_service = providers.Factory(
        TradeService,
        db_client=root.db_client,
    )
