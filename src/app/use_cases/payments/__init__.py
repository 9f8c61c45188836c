"""Supplier payment ledger use cases"""
from .create_supplier_payment import CreateSupplierPayment
from .amend_supplier_payment import AmendSupplierPayment
from .delete_supplier_payment import DeleteSupplierPayment
from .list_supplier_payments import ListSupplierPayments
from .dtos import (
    CreateSupplierPaymentCommandDTO,
    AmendSupplierPaymentCommandDTO,
    SupplierPaymentResponseDTO,
    ListSupplierPaymentsResponseDTO,
)

__all__ = [
    "CreateSupplierPayment",
    "AmendSupplierPayment",
    "DeleteSupplierPayment",
    "ListSupplierPayments",
    "CreateSupplierPaymentCommandDTO",
    "AmendSupplierPaymentCommandDTO",
    "SupplierPaymentResponseDTO",
    "ListSupplierPaymentsResponseDTO",
]
