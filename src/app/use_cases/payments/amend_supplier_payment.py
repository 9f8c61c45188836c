"""AmendSupplierPayment Use Case

Fills in or corrects a supplier payment, e.g. the amount of a blank cheque.
"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.supplier_payment_repository import SupplierPaymentRepository
from src.domain.base import to_money
from src.domain.supplier_payment import PaymentStatus
from .dtos import AmendSupplierPaymentCommandDTO, SupplierPaymentResponseDTO


class AmendSupplierPayment:
    """
    Use Case: Amend a supplier payment

    Business Rules:
    1. Payment must exist
    2. Amount may not be negative
    3. An amount above 0 completes the payment
    """

    def __init__(self, uow: UnitOfWork, payment_repo: SupplierPaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(
        self, command: AmendSupplierPaymentCommandDTO
    ) -> Result[SupplierPaymentResponseDTO]:
        if command.amount is not None and command.amount < 0:
            return Return.err(
                Error(
                    code="INVALID_AMOUNT",
                    message="Payment amount cannot be negative",
                    reason=f"amount={command.amount}",
                )
            )

        try:
            payment = await self.payment_repo.get_by_id(command.payment_id)

            if not payment:
                return Return.err(
                    Error(
                        code="PAYMENT_NOT_FOUND",
                        message=f"Payment with ID {command.payment_id} not found",
                        reason="Payment does not exist",
                    )
                )

            if command.amount is not None:
                payment.amount = to_money(command.amount)
                if payment.amount > 0:
                    payment.status = PaymentStatus.COMPLETED
            if command.reference_no is not None:
                payment.reference_no = command.reference_no
            if command.note is not None:
                payment.note = command.note
            if command.date is not None:
                payment.date = command.date

            updated = await self.payment_repo.update(payment)
            await self.uow.commit()

            return Return.ok(SupplierPaymentResponseDTO.from_entity(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="AMEND_PAYMENT_FAILED",
                    message="Failed to amend supplier payment",
                    reason=str(e),
                )
            )
