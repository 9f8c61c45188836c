"""Supplier Payment Domain Entity

Ledger of payments made to suppliers (cheque, bank transfer, cash).
Independent of bills and products.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class PaymentMode(str, Enum):
    """How the supplier was paid"""
    ONLINE = "ONLINE"
    CHEQUE = "CHEQUE"
    CASH = "CASH"
    NEFT = "NEFT"
    RTGS = "RTGS"
    UPI = "UPI"


class PaymentStatus(str, Enum):
    """Supplier payment status"""
    PENDING = "PENDING"      # Blank cheque, amount not yet known
    COMPLETED = "COMPLETED"


class SupplierPayment(BaseModel, table=True):
    """
    Supplier Payment - Money paid out to a supplier company

    Domain Rules:
    - amount is non-negative; 0 means the amount is not known yet
    - PENDING is only valid for a CHEQUE with amount 0 (blank cheque)
    - Setting amount > 0 completes the payment
    """

    __tablename__ = "supplier_payments"
    __table_args__ = (
        Index('ix_supplier_payments_date', 'date'),
        Index('ix_supplier_payments_status', 'status'),
        CheckConstraint('amount >= 0', name='amount_non_negative'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque payment identifier"
    )

    company_name: str = Field(
        sa_column=Column(String(120), nullable=False),
        description="Supplier company"
    )

    amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Amount paid (0 = blank cheque)"
    )

    payment_mode: PaymentMode = Field(
        default=PaymentMode.ONLINE,
        description="Payment mode"
    )

    status: PaymentStatus = Field(
        default=PaymentStatus.COMPLETED,
        description="PENDING or COMPLETED"
    )

    reference_no: str = Field(default="", description="Cheque / UTR number")
    note: str = Field(default="", description="Free text note")

    date: datetime = Field(
        default_factory=datetime.utcnow,
        description="Payment date"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Record creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )


def is_blank_cheque(amount: Decimal, payment_mode: PaymentMode) -> bool:
    """A cheque issued without an amount"""
    return amount == 0 and payment_mode == PaymentMode.CHEQUE
