"""
Trade Database Model

SQLAlchemy model for trades, with the commission embedded in the same row.
"""

from sqlalchemy import Column, Integer, Numeric, PrimaryKeyConstraint
from sqlalchemy.orm import composite

from src.infrastructure.database.models.base import Base
from src.infrastructure.database.models.commission import Commission, commission_columns

TRADES_SCHEMA = "tr"


class TradeModel(Base):
    """Trade database model."""

    __tablename__ = 'trades'
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_tr_trades"),
        {"schema": TRADES_SCHEMA},
    )

    id = Column("id", Integer, autoincrement=True)
    quantity = Column("quantity", Numeric(33, 10), nullable=False)
    price = Column("price", Numeric(33, 10), nullable=False)

    commission_amount, commission_currency = commission_columns("commission")
    commission = composite(Commission, commission_amount, commission_currency)

    def __repr__(self) -> str:
        return (
            f"TradeModel(id={self.id!r}, quantity={self.quantity!r}, "
            f"price={self.price!r}, commission={self.commission!r})"
        )
