"""GetBill Use Case

Retrieves a single bill with its line items.
"""

from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.bill_item_repository import BillItemRepository
from .dtos import BillResponseDTO


class GetBill:
    """
    Use Case: View a bill

    Returns BILL_NOT_FOUND if the bill does not exist.
    """

    def __init__(self, bill_repo: BillRepository, bill_item_repo: BillItemRepository):
        self.bill_repo = bill_repo
        self.bill_item_repo = bill_item_repo

    async def execute(self, bill_id: str) -> Result[BillResponseDTO]:
        bill = await self.bill_repo.get_by_id(bill_id)

        if not bill:
            return Return.err(
                Error(
                    code="BILL_NOT_FOUND",
                    message=f"Bill with ID {bill_id} not found",
                    reason="Bill does not exist",
                )
            )

        items = await self.bill_item_repo.get_by_bill_id(bill.id)
        return Return.ok(BillResponseDTO.from_entities(bill, items))
