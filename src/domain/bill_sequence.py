"""Bill Sequence Domain Entity

Dedicated counter that hands out bill numbers.
"""

from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Integer
from src.domain.base import BaseModel

BILL_SEQUENCE_NAME = "bill"


class BillSequence(BaseModel, table=True):
    """
    Bill Sequence - Last bill number handed out

    Domain Rules:
    - One row per sequence name
    - last_value only grows, and only inside the bill-creation transaction
    """

    __tablename__ = "bill_sequences"
    __table_args__ = (
        CheckConstraint('last_value >= 0', name='last_value_non_negative'),
    )

    name: str = Field(
        default=BILL_SEQUENCE_NAME,
        primary_key=True,
        description="Sequence name"
    )

    last_value: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Last number handed out (0 = none yet)"
    )
