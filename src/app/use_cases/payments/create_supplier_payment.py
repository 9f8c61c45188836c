"""CreateSupplierPayment Use Case

Adds an entry to the supplier payment ledger.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.supplier_payment_repository import SupplierPaymentRepository
from src.domain.base import to_money
from src.domain.supplier_payment import SupplierPayment, PaymentStatus, is_blank_cheque
from .dtos import CreateSupplierPaymentCommandDTO, SupplierPaymentResponseDTO

logger = logging.getLogger(__name__)


class CreateSupplierPayment:
    """
    Use Case: Record a payment to a supplier

    Business Rules:
    1. amount defaults to 0 and is never negative
    2. CHEQUE with amount 0 is a blank cheque: status PENDING
    3. PENDING is rejected for anything that is not a blank cheque
    4. Everything else is COMPLETED
    """

    def __init__(self, uow: UnitOfWork, payment_repo: SupplierPaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(
        self, command: CreateSupplierPaymentCommandDTO
    ) -> Result[SupplierPaymentResponseDTO]:
        company_name = command.company_name.strip()
        if not company_name:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Please provide a company name",
                    reason="company_name is blank",
                )
            )

        amount = to_money(command.amount)
        blank_cheque = is_blank_cheque(amount, command.payment_mode)

        if command.status == PaymentStatus.PENDING and not blank_cheque:
            return Return.err(
                Error(
                    code="INVALID_PAYMENT_STATUS",
                    message="Only a cheque without an amount can be pending",
                    reason=f"amount={amount}, payment_mode={command.payment_mode.value}",
                )
            )

        status = PaymentStatus.PENDING if blank_cheque else PaymentStatus.COMPLETED

        try:
            payment = SupplierPayment(
                company_name=company_name,
                amount=amount,
                payment_mode=command.payment_mode,
                status=status,
                reference_no=command.reference_no,
                note=command.note,
                date=command.date or datetime.utcnow(),
            )
            created = await self.payment_repo.create(payment)
            await self.uow.commit()

            logger.info(
                f"Supplier payment to {company_name} recorded: "
                f"{amount} via {command.payment_mode.value} ({status.value})"
            )
            return Return.ok(SupplierPaymentResponseDTO.from_entity(created))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_PAYMENT_FAILED",
                    message="Failed to record supplier payment",
                    reason=str(e),
                )
            )
