"""Data Transfer Objects for Supplier Payment Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.supplier_payment import SupplierPayment, PaymentMode, PaymentStatus


class CreateSupplierPaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a supplier payment

    A CHEQUE with amount 0 is stored as a PENDING blank cheque.
    """

    company_name: str = Field(..., min_length=1, description="Supplier company")
    amount: Decimal = Field(default=Decimal("0"), ge=0, description="Amount (0 = not known yet)")
    payment_mode: PaymentMode = Field(default=PaymentMode.ONLINE)
    status: Optional[PaymentStatus] = Field(
        default=None,
        description="Requested status; derived from amount and mode when omitted"
    )
    reference_no: str = Field(default="", description="Cheque / UTR number")
    note: str = Field(default="")
    date: Optional[datetime] = Field(default=None, description="Payment date (defaults to now)")


class AmendSupplierPaymentCommandDTO(BaseModel):
    """
    Command DTO for amending a supplier payment

    Typically fills in the amount of a blank cheque.
    """

    payment_id: str
    amount: Optional[Decimal] = Field(default=None, description="New amount (>= 0)")
    reference_no: Optional[str] = None
    note: Optional[str] = None
    date: Optional[datetime] = None


class SupplierPaymentResponseDTO(BaseModel):
    payment_id: str
    company_name: str
    amount: Decimal
    payment_mode: str
    status: str
    reference_no: str
    note: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, payment: SupplierPayment) -> "SupplierPaymentResponseDTO":
        return cls(
            payment_id=payment.id,
            company_name=payment.company_name,
            amount=payment.amount,
            payment_mode=PaymentMode(payment.payment_mode).value,
            status=PaymentStatus(payment.status).value,
            reference_no=payment.reference_no or "",
            note=payment.note or "",
            date=payment.date,
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "payment_id": "c3b9...",
                "company_name": "IFFCO",
                "amount": "0.00",
                "payment_mode": "CHEQUE",
                "status": "PENDING",
                "reference_no": "004512",
                "note": "Blank cheque for March stock",
                "date": "2024-03-01T00:00:00Z",
                "created_at": "2024-03-01T00:00:00Z",
                "updated_at": "2024-03-01T00:00:00Z",
            }
        }


class ListSupplierPaymentsResponseDTO(BaseModel):
    payments: List[SupplierPaymentResponseDTO]
    total: int
    limit: int
    offset: int
