"""SQLAlchemy implementation of SupplierPaymentRepository"""

from typing import List, Optional, Tuple
from datetime import datetime
from sqlalchemy import or_
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.repositories.search import LIKE_ESCAPE, contains_pattern
from src.app.repositories.supplier_payment_repository import SupplierPaymentRepository
from src.domain.supplier_payment import SupplierPayment, PaymentMode, PaymentStatus


class SqlAlchemySupplierPaymentRepository(SupplierPaymentRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: SupplierPayment) -> SupplierPayment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_id(self, payment_id: str) -> Optional[SupplierPayment]:
        statement = select(SupplierPayment).where(SupplierPayment.id == payment_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, payment: SupplierPayment) -> SupplierPayment:
        payment.updated_at = datetime.utcnow()
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def delete(self, payment: SupplierPayment) -> None:
        await self.session.delete(payment)
        await self.session.flush()

    async def list(
        self,
        search: Optional[str] = None,
        status: Optional[PaymentStatus] = None,
        payment_mode: Optional[PaymentMode] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[SupplierPayment], int]:
        conditions = []

        if search:
            pattern = contains_pattern(search)
            conditions.append(
                or_(
                    SupplierPayment.company_name.ilike(pattern, escape=LIKE_ESCAPE),
                    SupplierPayment.reference_no.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        if status:
            conditions.append(SupplierPayment.status == status)

        if payment_mode:
            conditions.append(SupplierPayment.payment_mode == payment_mode)

        count_statement = select(func.count()).select_from(SupplierPayment)
        statement = select(SupplierPayment)
        for condition in conditions:
            count_statement = count_statement.where(condition)
            statement = statement.where(condition)

        total = (await self.session.execute(count_statement)).scalar_one()

        statement = statement.order_by(SupplierPayment.date.desc())
        statement = statement.limit(limit).offset(offset)
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total
