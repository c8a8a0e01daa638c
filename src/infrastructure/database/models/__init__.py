from .base import Base
from .commission import Commission, commission_columns
from .trade_model import TradeModel


__all__ = [
    "Base",
    "Commission",
    "commission_columns",
    "TradeModel",
]
