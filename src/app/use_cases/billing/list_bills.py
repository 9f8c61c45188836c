"""
List Bills Use Case

Retrieves bill history with search, payment and customer-type filters.
"""
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.bill_repository import BillRepository, PaidFilter
from src.app.repositories.bill_item_repository import BillItemRepository
from src.domain.bill import CustomerType
from .dtos import BillResponseDTO, ListBillsResponseDTO

TYPE_FILTER_ALL = "ALL"


class ListBills:
    """
    Use case: View bill history

    Bills are ordered by created_at DESC (most recent first).
    """

    def __init__(self, bill_repo: BillRepository, bill_item_repo: BillItemRepository):
        """
        Initialize with bill repositories.

        Args:
            bill_repo: BillRepository instance
            bill_item_repo: BillItemRepository instance
        """
        self.bill_repo = bill_repo
        self.bill_item_repo = bill_item_repo

    async def execute(
        self,
        search: Optional[str] = None,
        paid_filter: PaidFilter = PaidFilter.ALL,
        type_filter: str = TYPE_FILTER_ALL,
        page: int = 1,
        limit: int = 20,
    ) -> Result[ListBillsResponseDTO]:
        """
        List bills with filters and pagination.

        Args:
            search: Customer name or bill number fragment
            paid_filter: ALL, PAID or DUE
            type_filter: ALL, RETAILER or WHOLESALER
            page: 1-based page number
            limit: Bills per page

        Returns:
            Result[ListBillsResponseDTO]: Paginated bill list
        """
        page = max(page, 1)
        customer_type = None
        if type_filter and type_filter != TYPE_FILTER_ALL:
            customer_type = CustomerType(type_filter)

        bills, total = await self.bill_repo.search(
            search=search or None,
            paid_filter=paid_filter,
            customer_type=customer_type,
            limit=limit,
            offset=(page - 1) * limit,
        )

        items_by_bill = await self.bill_item_repo.get_by_bill_ids([bill.id for bill in bills])

        return Return.ok(
            ListBillsResponseDTO(
                bills=[
                    BillResponseDTO.from_entities(bill, items_by_bill.get(bill.id, []))
                    for bill in bills
                ],
                total=total,
                page=page,
                limit=limit,
            )
        )
