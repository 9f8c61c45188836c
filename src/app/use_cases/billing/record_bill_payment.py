"""RecordBillPayment Use Case

Records money received against an existing bill.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.bill_item_repository import BillItemRepository
from src.domain.base import to_money
from .dtos import RecordBillPaymentCommandDTO, BillResponseDTO

logger = logging.getLogger(__name__)


class RecordBillPayment:
    """
    Use Case: Record a payment on a bill

    Business Rules:
    1. Amount must be > 0
    2. Bill must exist
    3. Paid amount only grows, due amount never drops below 0
    4. Catalog is not touched

    Flow:
    1. Validate amount
    2. Get bill with lock (SELECT FOR UPDATE)
    3. Compute new paid/due and reject over-payment
    4. Update bill and commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        bill_repo: BillRepository,
        bill_item_repo: BillItemRepository,
    ):
        self.uow = uow
        self.bill_repo = bill_repo
        self.bill_item_repo = bill_item_repo

    async def execute(self, command: RecordBillPaymentCommandDTO) -> Result[BillResponseDTO]:
        """
        Execute payment recording

        Args:
            command: RecordBillPaymentCommandDTO with bill_id and amount

        Returns:
            Result[BillResponseDTO]: Success with the updated bill or error
        """
        # Step 1: Validate amount
        amount = to_money(command.amount)
        if amount <= 0:
            return Return.err(
                Error(
                    code="INVALID_AMOUNT",
                    message="Invalid payment amount",
                    reason=f"amount={command.amount}",
                )
            )

        try:
            # Step 2: Get bill with lock
            bill = await self.bill_repo.get_by_id(command.bill_id, for_update=True)
            if not bill:
                return Return.err(
                    Error(
                        code="BILL_NOT_FOUND",
                        message=f"Bill with ID {command.bill_id} not found",
                        reason="Bill does not exist",
                    )
                )

            # Step 3: Compute new balances
            new_paid = to_money(bill.paid_amount) + amount
            new_due = to_money(bill.total_amount) - new_paid

            if new_due < 0:
                return Return.err(
                    Error(
                        code="OVER_PAYMENT",
                        message="Payment exceeds due amount",
                        reason=f"due={bill.due_amount}, amount={amount}",
                    )
                )

            # Step 4: Update bill
            bill.paid_amount = new_paid
            bill.due_amount = new_due
            updated_bill = await self.bill_repo.update(bill)

            await self.uow.commit()

            logger.info(
                f"Payment of {amount} recorded on bill {updated_bill.bill_number}, "
                f"due now {new_due}"
            )

            items = await self.bill_item_repo.get_by_bill_id(updated_bill.id)
            return Return.ok(BillResponseDTO.from_entities(updated_bill, items))

        except Exception as e:
            await self.uow.rollback()
            logger.exception("Recording bill payment failed")
            return Return.err(
                Error(
                    code="RECORD_PAYMENT_FAILED",
                    message="Failed to record payment",
                    reason=str(e),
                )
            )
