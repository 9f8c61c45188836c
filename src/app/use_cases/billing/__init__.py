"""Billing use cases"""
from .create_bill import CreateBill
from .record_bill_payment import RecordBillPayment
from .get_bill import GetBill
from .list_bills import ListBills
from .generate_bill_invoice import GenerateBillInvoice
from .dtos import (
    BillItemCommandDTO,
    CreateBillCommandDTO,
    RecordBillPaymentCommandDTO,
    BillItemDTO,
    BillResponseDTO,
    ListBillsResponseDTO,
    BillInvoiceResponseDTO,
)

__all__ = [
    "CreateBill",
    "RecordBillPayment",
    "GetBill",
    "ListBills",
    "GenerateBillInvoice",
    "BillItemCommandDTO",
    "CreateBillCommandDTO",
    "RecordBillPaymentCommandDTO",
    "BillItemDTO",
    "BillResponseDTO",
    "ListBillsResponseDTO",
    "BillInvoiceResponseDTO",
]
