from .base import BaseModel, generate_uuid, to_money
from .product import Product
from .bill import Bill, CustomerType
from .bill_item import BillItem
from .bill_sequence import BillSequence
from .supplier_payment import SupplierPayment, PaymentMode, PaymentStatus

__all__ = [
    "BaseModel",
    "generate_uuid",
    "to_money",
    "Product",
    "Bill",
    "CustomerType",
    "BillItem",
    "BillSequence",
    "SupplierPayment",
    "PaymentMode",
    "PaymentStatus",
]
