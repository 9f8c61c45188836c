"""SQLAlchemy Bill Repository Implementation

Implements bill persistence using SQLAlchemy async session.
"""

from typing import List, Optional, Tuple
from datetime import datetime
from sqlalchemy import String, cast, or_
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.repositories.search import LIKE_ESCAPE, contains_pattern
from src.app.repositories.bill_repository import BillRepository, PaidFilter
from src.domain.bill import Bill, CustomerType


class SqlAlchemyBillRepository(BillRepository):
    """
    SQLAlchemy implementation of BillRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, bill: Bill) -> Bill:
        self.session.add(bill)
        await self.session.flush()
        await self.session.refresh(bill)
        return bill

    async def get_by_id(self, bill_id: str, for_update: bool = False) -> Optional[Bill]:
        statement = select(Bill).where(Bill.id == bill_id)

        if for_update:
            statement = statement.with_for_update()

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, bill: Bill) -> Bill:
        bill.updated_at = datetime.utcnow()
        self.session.add(bill)
        await self.session.flush()
        await self.session.refresh(bill)
        return bill

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

        A bill matches the search text when its customer name contains it
        (case-insensitive) or its bill number contains it as digits.
        """
        conditions = []

        if search:
            pattern = contains_pattern(search)
            conditions.append(
                or_(
                    Bill.customer_name.ilike(pattern, escape=LIKE_ESCAPE),
                    cast(Bill.bill_number, String).like(pattern, escape=LIKE_ESCAPE),
                )
            )

        if paid_filter == PaidFilter.PAID:
            conditions.append(Bill.due_amount <= 0)
        elif paid_filter == PaidFilter.DUE:
            conditions.append(Bill.due_amount > 0)

        if customer_type:
            conditions.append(Bill.customer_type == customer_type)

        count_statement = select(func.count()).select_from(Bill)
        statement = select(Bill)
        for condition in conditions:
            count_statement = count_statement.where(condition)
            statement = statement.where(condition)

        total = (await self.session.execute(count_statement)).scalar_one()

        statement = statement.order_by(Bill.created_at.desc(), Bill.bill_number.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all()), total
