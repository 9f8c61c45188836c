"""Bill Repository Interface

Defines the contract for bill persistence operations.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Tuple
from src.domain.bill import Bill, CustomerType


class PaidFilter(str, Enum):
    """Bill history payment filter"""
    ALL = "ALL"
    PAID = "PAID"
    DUE = "DUE"


class BillRepository(ABC):
    """
    Repository interface for Bill persistence
    """

    @abstractmethod
    async def create(self, bill: Bill) -> Bill:
        """
        Create a new bill

        Args:
            bill: Bill entity to persist

        Returns:
            Created Bill
        """
        pass

    @abstractmethod
    async def get_by_id(self, bill_id: str, for_update: bool = False) -> Optional[Bill]:
        """
        Retrieve bill by ID

        Args:
            bill_id: Bill identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Bill if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, bill: Bill) -> Bill:
        """Persist changes to paid/due amounts"""
        pass

    @abstractmethod
    async def search(
        self,
        search: Optional[str] = None,
        paid_filter: PaidFilter = PaidFilter.ALL,
        customer_type: Optional[CustomerType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Bill], int]:
        """
        Search bills, newest first

        Args:
            search: Case-insensitive customer name or bill number fragment
            paid_filter: ALL, PAID (due <= 0) or DUE (due > 0)
            customer_type: Optional customer type filter
            limit: Maximum number of bills to return
            offset: Offset for pagination

        Returns:
            Tuple of (bills, total matching count)
        """
        pass
