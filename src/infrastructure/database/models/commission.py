"""
Commission Value Object

Owned value object embedded in its owner's row as prefixed columns.
"""

import dataclasses
from decimal import Decimal
from typing import Optional, Tuple

from sqlalchemy import Column, Numeric, Text, text
from sqlalchemy.ext.mutable import MutableComposite


@dataclasses.dataclass
class Commission(MutableComposite):
    """
    Commission charged on a trade.

    Has no identity of its own. Assigning a new instance to the owner and
    mutating the fields of the current instance are both tracked as changes
    to the owner's columns.
    """

    amount: Optional[Decimal] = None
    currency: Optional[str] = None

    def __setattr__(self, key, value):
        object.__setattr__(self, key, value)
        # propagate to the owner's columns
        self.changed()


def commission_columns(prefix: str) -> Tuple[Column, Column]:
    """
    Build the flattened columns for a commission owned under ``prefix``.

    The amount column declares a storage default of 0, so an INSERT that
    leaves the amount unset still produces a non-null row.
    """
    amount = Column(
        f"{prefix}_amount",
        Numeric(33, 10),
        nullable=False,
        server_default=text("0"),
    )
    currency = Column(f"{prefix}_currency", Text, nullable=False)
    return amount, currency
