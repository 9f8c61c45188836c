"""DeleteSupplierPayment Use Case"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.supplier_payment_repository import SupplierPaymentRepository


class DeleteSupplierPayment:
    """Use Case: Remove an entry from the supplier payment ledger"""

    def __init__(self, uow: UnitOfWork, payment_repo: SupplierPaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(self, payment_id: str) -> Result[None]:
        try:
            payment = await self.payment_repo.get_by_id(payment_id)

            if not payment:
                return Return.err(
                    Error(
                        code="PAYMENT_NOT_FOUND",
                        message=f"Payment with ID {payment_id} not found",
                        reason="Payment does not exist",
                    )
                )

            await self.payment_repo.delete(payment)
            await self.uow.commit()
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_PAYMENT_FAILED",
                    message="Failed to delete supplier payment",
                    reason=str(e),
                )
            )
