"""
List Supplier Payments Use Case

Supplier payment ledger, most recent payment date first.
"""
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.supplier_payment_repository import SupplierPaymentRepository
from src.domain.supplier_payment import PaymentMode, PaymentStatus
from .dtos import ListSupplierPaymentsResponseDTO, SupplierPaymentResponseDTO


class ListSupplierPayments:
    """Use case: View the supplier payment ledger"""

    def __init__(self, payment_repo: SupplierPaymentRepository):
        self.payment_repo = payment_repo

    async def execute(
        self,
        search: Optional[str] = None,
        status: Optional[PaymentStatus] = None,
        payment_mode: Optional[PaymentMode] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[ListSupplierPaymentsResponseDTO]:
        """
        List supplier payments with pagination.

        Args:
            search: Company name or reference number fragment
            status: Optional PENDING / COMPLETED filter (PENDING lists blank cheques)
            payment_mode: Optional payment mode filter
            limit: Maximum number of payments to return
            offset: Number of payments to skip

        Returns:
            Result[ListSupplierPaymentsResponseDTO]
        """
        payments, total = await self.payment_repo.list(
            search=search or None,
            status=status,
            payment_mode=payment_mode,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ListSupplierPaymentsResponseDTO(
                payments=[SupplierPaymentResponseDTO.from_entity(p) for p in payments],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
