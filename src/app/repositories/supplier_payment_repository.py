"""Supplier Payment Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.supplier_payment import SupplierPayment, PaymentMode, PaymentStatus


class SupplierPaymentRepository(ABC):
    """Repository interface for SupplierPayment persistence"""

    @abstractmethod
    async def create(self, payment: SupplierPayment) -> SupplierPayment:
        """Persist a new supplier payment"""
        pass

    @abstractmethod
    async def get_by_id(self, payment_id: str) -> Optional[SupplierPayment]:
        """Retrieve supplier payment by ID"""
        pass

    @abstractmethod
    async def update(self, payment: SupplierPayment) -> SupplierPayment:
        """Persist changes to a supplier payment"""
        pass

    @abstractmethod
    async def delete(self, payment: SupplierPayment) -> None:
        """Remove a supplier payment"""
        pass

    @abstractmethod
    async def list(
        self,
        search: Optional[str] = None,
        status: Optional[PaymentStatus] = None,
        payment_mode: Optional[PaymentMode] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[SupplierPayment], int]:
        """
        List supplier payments, most recent date first

        Args:
            search: Case-insensitive company name or reference number fragment
            status: Optional PENDING / COMPLETED filter
            payment_mode: Optional payment mode filter
            limit: Maximum number of payments to return
            offset: Offset for pagination

        Returns:
            Tuple of (payments, total matching count)
        """
        pass
