"""Bill Item Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, List
from src.domain.bill_item import BillItem


class BillItemRepository(ABC):
    """Repository interface for BillItem persistence"""

    @abstractmethod
    async def create_many(self, items: List[BillItem]) -> List[BillItem]:
        """
        Persist the line items of a new bill

        Args:
            items: Line items, already linked to their bill

        Returns:
            Created line items
        """
        pass

    @abstractmethod
    async def get_by_bill_id(self, bill_id: str) -> List[BillItem]:
        """Line items of one bill, in bill order"""
        pass

    @abstractmethod
    async def get_by_bill_ids(self, bill_ids: List[str]) -> Dict[str, List[BillItem]]:
        """Line items of several bills, grouped by bill id"""
        pass
