"""Request schemas for Supplier Payment API"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from src.domain.supplier_payment import PaymentMode, PaymentStatus


class CreateSupplierPaymentRequestSchema(BaseModel):
    """
    Used for POST /payments endpoint

    Leave amount at 0 with payment_mode CHEQUE to record a blank cheque.
    """

    company_name: str = Field(..., min_length=1)
    amount: Decimal = Field(default=Decimal("0"), ge=0)
    payment_mode: PaymentMode = PaymentMode.ONLINE
    status: Optional[PaymentStatus] = None
    reference_no: str = ""
    note: str = ""
    date: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            "example": {
                "company_name": "IFFCO",
                "amount": "0",
                "payment_mode": "CHEQUE",
                "reference_no": "004512",
                "note": "Blank cheque for March stock",
            }
        }


class AmendSupplierPaymentRequestSchema(BaseModel):
    """Used for PATCH /payments/{payment_id} endpoint"""

    amount: Optional[Decimal] = Field(default=None, ge=0)
    reference_no: Optional[str] = None
    note: Optional[str] = None
    date: Optional[datetime] = None
