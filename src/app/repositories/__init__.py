from .product_repository import ProductRepository
from .bill_repository import BillRepository, PaidFilter
from .bill_item_repository import BillItemRepository
from .bill_sequence_repository import BillSequenceRepository
from .supplier_payment_repository import SupplierPaymentRepository

__all__ = [
    "ProductRepository",
    "BillRepository",
    "PaidFilter",
    "BillItemRepository",
    "BillSequenceRepository",
    "SupplierPaymentRepository",
]
