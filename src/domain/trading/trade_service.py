import logging
from decimal import Decimal
from typing import Optional

from src.commons.enums.commission_enums import CommissionUpdateMode
from src.domain.trading.dtos.trade_dto import CommissionDTO, TradeDTO
from src.infrastructure.database.change_tracking import describe_changes
from src.infrastructure.database.client import PostgresClient
from src.infrastructure.database.models import Commission
from src.infrastructure.database.repositories.trade_repository import TradeRepository


logger = logging.getLogger(__name__)


class TradeNotFoundError(LookupError):
    def __init__(self, trade_id: int):
        super().__init__(f"Trade {trade_id} not found")
        self.trade_id = trade_id


class TradeService:
    def __init__(self, db_client: PostgresClient):
        self.db_client = db_client

    async def record_trade(self, trade: TradeDTO) -> TradeDTO:
        async with self.db_client.get_session() as session:
            repo = TradeRepository(session)
            return await repo.save(trade)

    async def get_trade(self, trade_id: int) -> Optional[TradeDTO]:
        async with self.db_client.get_session() as session:
            repo = TradeRepository(session)
            return await repo.get_dto_by_id(trade_id)

    async def amend_trade(
        self,
        trade_id: int,
        quantity: Decimal,
        price: Decimal,
        commission: CommissionDTO,
        mode: CommissionUpdateMode = CommissionUpdateMode.REPLACE,
    ) -> TradeDTO:
        """
        Change the quantity, price and commission of a stored trade.

        With ``REPLACE`` a new commission object is assigned to the trade;
        with ``IN_PLACE`` the fields of the loaded commission are mutated.
        Returns the trade as held in memory after the commit; read it back
        with ``get_trade`` to see what was persisted.
        """
        async with self.db_client.get_session() as session:
            repo = TradeRepository(session)
            model = await repo.get_by_id(trade_id)

            if model is None:
                raise TradeNotFoundError(trade_id)

            if mode == CommissionUpdateMode.REPLACE:
                model.commission = Commission(
                    amount=commission.amount,
                    currency=commission.currency,
                )
            else:
                model.commission.amount = commission.amount
                model.commission.currency = commission.currency

            model.quantity = quantity
            model.price = price

            logger.info(
                f"Amending trade {trade_id} ({mode.value}): {describe_changes(model)}"
            )

            await repo.commit()
            return repo.model_to_dto(model)
