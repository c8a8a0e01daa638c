from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class CommissionDTO(BaseModel):
    """
    Commission charged on a trade.

    ``amount=None`` leaves the value to the storage default on insert.
    """

    model_config = ConfigDict(from_attributes=True)

    amount: Optional[Decimal] = None
    currency: str = Field(..., min_length=1)


class TradeDTO(BaseModel):
    """Trade read model (Pydantic)."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    quantity: Decimal
    price: Decimal
    commission: CommissionDTO
