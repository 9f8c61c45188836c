"""Data Transfer Objects for Billing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.bill import Bill, CustomerType
from src.domain.bill_item import BillItem


class BillItemCommandDTO(BaseModel):
    """
    One cart line submitted for billing

    price and bag_weight are what the client showed; the bill is priced
    from the catalog.
    """

    product_id: str = Field(
        ...,
        description="Product identifier"
    )

    quantity: int = Field(
        ...,
        ge=1,
        description="Number of bags (>= 1)"
    )

    product_name: Optional[str] = Field(
        default=None,
        description="Product name as shown in the cart"
    )

    price: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Unit price as shown in the cart (informational)"
    )

    bag_weight: Optional[int] = Field(
        default=None,
        gt=0,
        description="Kilograms per bag as shown in the cart"
    )


class CreateBillCommandDTO(BaseModel):
    """
    Command DTO for creating a bill

    Used as input to CreateBill use case.
    """

    customer_name: str = Field(..., description="Customer name")
    customer_phone: Optional[str] = Field(default=None)
    customer_address: Optional[str] = Field(default=None)
    customer_type: CustomerType = Field(default=CustomerType.RETAILER)

    customer_gstin: Optional[str] = Field(default=None)
    customer_cst: Optional[str] = Field(default=None)
    customer_tin: Optional[str] = Field(default=None)
    hsn_code: Optional[str] = Field(default=None)
    vehicle_no: Optional[str] = Field(default=None)
    supplier_ref: Optional[str] = Field(default=None)
    book_no: Optional[str] = Field(default=None)

    cgst: Decimal = Field(default=Decimal("0"), ge=0, description="CGST amount (wholesaler)")
    sgst: Decimal = Field(default=Decimal("0"), ge=0, description="SGST amount (wholesaler)")
    igst: Decimal = Field(default=Decimal("0"), ge=0, description="IGST amount (wholesaler)")

    items: List[BillItemCommandDTO] = Field(
        ...,
        min_length=1,
        description="Cart lines"
    )

    paid_amount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Amount paid at checkout (defaults to 0)"
    )


class RecordBillPaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a payment against a bill

    amount is validated by the use case so that non-positive amounts
    produce INVALID_AMOUNT.
    """

    bill_id: str = Field(..., description="Bill identifier")
    amount: Decimal = Field(..., description="Amount received (must be > 0)")


class BillItemDTO(BaseModel):
    """Line item in bill responses"""

    id: str
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    bag_weight: Optional[int] = None
    line_total: Decimal


class BillResponseDTO(BaseModel):
    """
    Response DTO for bill operations

    Returned by CreateBill, RecordBillPayment, GetBill and ListBills.
    """

    bill_id: str = Field(..., description="Bill identifier")
    bill_number: int = Field(..., description="Sequential bill number")
    customer_name: str
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    customer_type: str
    customer_gstin: Optional[str] = None
    customer_cst: Optional[str] = None
    customer_tin: Optional[str] = None
    hsn_code: Optional[str] = None
    vehicle_no: Optional[str] = None
    supplier_ref: Optional[str] = None
    book_no: Optional[str] = None
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    subtotal_amount: Decimal
    total_amount: Decimal
    paid_amount: Decimal
    due_amount: Decimal
    is_due: bool = Field(..., description="True while an amount is still outstanding")
    items: List[BillItemDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entities(cls, bill: Bill, items: List[BillItem]) -> "BillResponseDTO":
        return cls(
            bill_id=bill.id,
            bill_number=bill.bill_number,
            customer_name=bill.customer_name,
            customer_phone=bill.customer_phone,
            customer_address=bill.customer_address,
            customer_type=CustomerType(bill.customer_type).value,
            customer_gstin=bill.customer_gstin,
            customer_cst=bill.customer_cst,
            customer_tin=bill.customer_tin,
            hsn_code=bill.hsn_code,
            vehicle_no=bill.vehicle_no,
            supplier_ref=bill.supplier_ref,
            book_no=bill.book_no,
            cgst=bill.cgst,
            sgst=bill.sgst,
            igst=bill.igst,
            subtotal_amount=bill.subtotal_amount,
            total_amount=bill.total_amount,
            paid_amount=bill.paid_amount,
            due_amount=bill.due_amount,
            is_due=bill.is_due,
            items=[
                BillItemDTO(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    bag_weight=item.bag_weight,
                    line_total=item.line_total,
                )
                for item in items
            ],
            created_at=bill.created_at,
            updated_at=bill.updated_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "bill_id": "0b9f1c9e-6f8e-4e55-8d3b-2b1f3c1f8a20",
                "bill_number": 1,
                "customer_name": "Ramesh Traders",
                "customer_type": "RETAILER",
                "cgst": "0.00",
                "sgst": "0.00",
                "igst": "0.00",
                "subtotal_amount": "900.00",
                "total_amount": "900.00",
                "paid_amount": "500.00",
                "due_amount": "400.00",
                "is_due": True,
                "items": [
                    {
                        "id": "9a1d...",
                        "product_id": "4f8a...",
                        "product_name": "Urea",
                        "quantity": 3,
                        "unit_price": "300.00",
                        "bag_weight": 50,
                        "line_total": "900.00",
                    }
                ],
                "created_at": "2024-01-31T10:00:00Z",
                "updated_at": "2024-01-31T10:00:00Z",
            }
        }


class ListBillsResponseDTO(BaseModel):
    """Paginated bill history"""

    bills: List[BillResponseDTO]
    total: int = Field(..., description="Bills matching the filters")
    page: int = Field(..., description="1-based page number")
    limit: int = Field(..., description="Page size")


class BillInvoiceResponseDTO(BaseModel):
    """
    Response DTO for printable invoices

    Returned by GenerateBillInvoice.
    """

    bill_id: str
    bill_number: int
    display_number: str = Field(..., description="Zero padded bill number")
    customer_type: str
    total_amount: Decimal
    pdf_base64: str = Field(..., description="Invoice PDF, base64 encoded")
    generated_at: datetime
