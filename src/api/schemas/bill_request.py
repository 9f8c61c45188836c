"""Request schemas for Bill API

Pydantic models for validating incoming HTTP requests.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from src.domain.bill import CustomerType


class BillItemRequestSchema(BaseModel):
    """One cart line"""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1, description="Bags (>= 1)")
    product_name: Optional[str] = Field(default=None, description="Name shown in the cart")
    price: Optional[Decimal] = Field(default=None, ge=0, description="Price shown in the cart")
    bag_weight: Optional[int] = Field(default=None, gt=0)


class CreateBillRequestSchema(BaseModel):
    """
    Request schema for creating a bill

    Used for POST /bills endpoint.
    """

    customer_name: str = Field(
        ...,
        min_length=1,
        description="Customer name (required, non-empty)"
    )
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    customer_type: CustomerType = CustomerType.RETAILER

    customer_gstin: Optional[str] = None
    customer_cst: Optional[str] = None
    customer_tin: Optional[str] = None
    hsn_code: Optional[str] = None
    vehicle_no: Optional[str] = None
    supplier_ref: Optional[str] = None
    book_no: Optional[str] = None
    cgst: Decimal = Field(default=Decimal("0"), ge=0)
    sgst: Decimal = Field(default=Decimal("0"), ge=0)
    igst: Decimal = Field(default=Decimal("0"), ge=0)

    items: List[BillItemRequestSchema] = Field(..., min_length=1, description="Cart lines")

    paid_amount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Amount paid at checkout (defaults to 0)"
    )

    @field_validator('customer_name')
    @classmethod
    def validate_customer_name(cls, v):
        """Reject whitespace-only names"""
        if not v.strip():
            raise ValueError("Please provide a customer name")
        return v.strip()

    class Config:
        json_schema_extra = {
            "example": {
                "customer_name": "Ramesh Traders",
                "customer_phone": "9876543210",
                "customer_type": "RETAILER",
                "items": [
                    {"product_id": "4f8a7e0c-4a56-4f53-9d0e-3c8e5f1b2a11", "product_name": "Urea", "quantity": 3, "price": "300.00", "bag_weight": 50}
                ],
                "paid_amount": "500.00",
            }
        }


class RecordBillPaymentRequestSchema(BaseModel):
    """
    Request schema for recording a bill payment

    Used for POST /bills/{bill_id}/payments endpoint. Non-positive amounts
    are answered with INVALID_AMOUNT.
    """

    amount: Decimal = Field(..., description="Amount received")

    class Config:
        json_schema_extra = {"example": {"amount": "400.00"}}
