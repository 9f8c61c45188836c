"""SQLAlchemy implementation of BillSequenceRepository

The counter row is locked for the rest of the transaction, so concurrent
bill creations take numbers one after the other.
"""

import logging
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.bill_sequence_repository import BillSequenceRepository
from src.domain.bill import Bill
from src.domain.bill_sequence import BillSequence, BILL_SEQUENCE_NAME

logger = logging.getLogger(__name__)


class SqlAlchemyBillSequenceRepository(BillSequenceRepository):

    def __init__(self, session: AsyncSession, name: str = BILL_SEQUENCE_NAME):
        self.session = session
        self.name = name

    async def next_value(self) -> int:
        stmt = (
            select(BillSequence)
            .where(BillSequence.name == self.name)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        sequence = result.scalar_one_or_none()

        if sequence is None:
            # Continue after bills numbered before the counter existed
            max_stmt = select(func.max(Bill.bill_number))
            seed = (await self.session.execute(max_stmt)).scalar_one_or_none() or 0
            sequence = BillSequence(name=self.name, last_value=seed)
            self.session.add(sequence)
            logger.info(f"Initialized bill sequence '{self.name}' at {seed}")

        sequence.last_value += 1
        await self.session.flush()
        return sequence.last_value
