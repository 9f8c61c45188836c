"""Bill Item Domain Entity

Tracks individual line items within a bill.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class BillItem(BaseModel, table=True):
    """
    Bill Item - Individual line item within a bill

    Domain Rules:
    - Each line item belongs to exactly one bill
    - product_name, unit_price and bag_weight are snapshots taken at sale time
    - line_total = quantity * unit_price
    - Immutable once the bill is created
    """

    __tablename__ = "bill_items"
    __table_args__ = (
        Index('ix_bill_items_bill_id', 'bill_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque line item identifier"
    )

    bill_id: str = Field(
        sa_column=Column(String(36), ForeignKey("bills.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Bill"
    )

    product_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Product sold (non-owning reference)"
    )

    product_name: str = Field(
        sa_column=Column(String(60), nullable=False),
        description="Product name at sale time"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Number of bags (>= 1)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Catalog price per bag at sale time"
    )

    bag_weight: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
        description="Kilograms per bag at sale time"
    )

    line_total: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="quantity * unit_price"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Order of the line inside the bill"
    )
