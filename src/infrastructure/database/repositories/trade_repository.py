import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.trading.dtos.trade_dto import TradeDTO
from src.infrastructure.database.models import Commission, TradeModel

logger = logging.getLogger(__name__)


class TradeRepository:
    """
    Repository for trade persistence.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository.

        Args:
            session: Database session
        """
        self.session = session

    async def save(self, trade: TradeDTO) -> TradeDTO:
        """
        Insert a trade.

        Args:
            trade: Trade to insert (``id`` is ignored)

        Returns:
            The stored trade, with its generated id and storage defaults
        """
        model = TradeModel(
            quantity=trade.quantity,
            price=trade.price,
            commission=Commission(
                amount=trade.commission.amount,
                currency=trade.commission.currency,
            ),
        )

        await self.add(model)
        await self.session.refresh(model)

        logger.info(f"Trade {model.id} inserted")
        return self.model_to_dto(model)

    async def add(self, model: TradeModel) -> TradeModel:
        self.session.add(model)
        await self.session.commit()
        return model

    async def get_by_id(self, trade_id: int) -> Optional[TradeModel]:
        """Get trade by ID."""
        stmt = select(TradeModel).where(TradeModel.id == trade_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_dto_by_id(self, trade_id: int) -> Optional[TradeDTO]:
        model = await self.get_by_id(trade_id)

        if not model:
            return None

        return self.model_to_dto(model)

    async def commit(self) -> None:
        await self.session.commit()

    def clear(self) -> None:
        """Stop tracking every loaded instance; the next read goes to the database."""
        self.session.expunge_all()

    @staticmethod
    def model_to_dto(model: TradeModel) -> TradeDTO:
        return TradeDTO.model_validate(model)
