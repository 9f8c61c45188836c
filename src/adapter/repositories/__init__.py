from .product_repository import SqlAlchemyProductRepository
from .bill_repository import SqlAlchemyBillRepository
from .bill_item_repository import SqlAlchemyBillItemRepository
from .bill_sequence_repository import SqlAlchemyBillSequenceRepository
from .supplier_payment_repository import SqlAlchemySupplierPaymentRepository

__all__ = [
    "SqlAlchemyProductRepository",
    "SqlAlchemyBillRepository",
    "SqlAlchemyBillItemRepository",
    "SqlAlchemyBillSequenceRepository",
    "SqlAlchemySupplierPaymentRepository",
]
