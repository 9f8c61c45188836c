"""Bill Domain Entity

Tracks customer bills, their computed totals and payment state.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Integer, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class CustomerType(str, Enum):
    """Bill customer types"""
    RETAILER = "RETAILER"
    WHOLESALER = "WHOLESALER"


class Bill(BaseModel, table=True):
    """
    Bill - Sale of catalog products to a customer

    Domain Rules:
    - bill_number is unique and strictly increasing
    - subtotal_amount is the sum of all bill_items.line_total
    - total_amount = subtotal_amount + cgst + sgst + igst for wholesalers,
      subtotal_amount for retailers
    - due_amount = total_amount - paid_amount and is never negative
    - Items are immutable; only paid/due change after creation
    """

    __tablename__ = "bills"
    __table_args__ = (
        Index('ix_bills_bill_number', 'bill_number', unique=True),
        Index('ix_bills_customer_type', 'customer_type'),
        Index('ix_bills_created_at', 'created_at'),
        CheckConstraint('paid_amount >= 0', name='paid_non_negative'),
        CheckConstraint('due_amount >= 0', name='due_non_negative'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque bill identifier"
    )

    bill_number: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Sequential bill number starting at 1"
    )

    customer_name: str = Field(
        sa_column=Column(String(120), nullable=False),
        description="Customer name"
    )

    customer_phone: Optional[str] = Field(default=None, description="Customer phone")
    customer_address: Optional[str] = Field(default=None, description="Customer address")

    customer_type: CustomerType = Field(
        default=CustomerType.RETAILER,
        description="RETAILER or WHOLESALER"
    )

    # Wholesaler-specific fields
    customer_gstin: Optional[str] = Field(default=None)
    customer_cst: Optional[str] = Field(default=None)
    customer_tin: Optional[str] = Field(default=None)
    hsn_code: Optional[str] = Field(default=None)
    vehicle_no: Optional[str] = Field(default=None)
    supplier_ref: Optional[str] = Field(default=None)
    book_no: Optional[str] = Field(default=None)

    cgst: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="CGST amount"
    )

    sgst: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="SGST amount"
    )

    igst: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="IGST amount"
    )

    subtotal_amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Sum of line totals"
    )

    total_amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Subtotal plus taxes (wholesaler)"
    )

    paid_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Amount paid so far"
    )

    due_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Outstanding amount (total - paid)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Bill creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    @property
    def is_due(self) -> bool:
        return (self.due_amount or Decimal("0")) > 0

    @property
    def display_number(self) -> str:
        """Bill number as printed on invoices (zero padded)"""
        return str(self.bill_number).zfill(4)

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "0b9f1c9e-6f8e-4e55-8d3b-2b1f3c1f8a20",
                "bill_number": 1,
                "customer_name": "Ramesh Traders",
                "customer_type": "RETAILER",
                "subtotal_amount": "900.00",
                "total_amount": "900.00",
                "paid_amount": "500.00",
                "due_amount": "400.00",
                "created_at": "2024-01-31T00:00:00Z",
            }
        }
