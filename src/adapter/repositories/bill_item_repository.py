"""SQLAlchemy implementation of BillItemRepository"""

from collections import defaultdict
from typing import Dict, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.bill_item_repository import BillItemRepository
from src.domain.bill_item import BillItem


class SqlAlchemyBillItemRepository(BillItemRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, items: List[BillItem]) -> List[BillItem]:
        self.session.add_all(items)
        await self.session.flush()
        return items

    async def get_by_bill_id(self, bill_id: str) -> List[BillItem]:
        statement = (
            select(BillItem)
            .where(BillItem.bill_id == bill_id)
            .order_by(BillItem.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_bill_ids(self, bill_ids: List[str]) -> Dict[str, List[BillItem]]:
        grouped: Dict[str, List[BillItem]] = defaultdict(list)
        if not bill_ids:
            return grouped

        statement = (
            select(BillItem)
            .where(BillItem.bill_id.in_(bill_ids))
            .order_by(BillItem.bill_id, BillItem.position)
        )
        result = await self.session.execute(statement)
        for item in result.scalars().all():
            grouped[item.bill_id].append(item)
        return grouped
