"""SQLAlchemy implementation of ProductRepository

Stock decrements are a single guarded UPDATE so that two concurrent
bills can never both take the last bags.
"""

from typing import List, Optional
from datetime import datetime
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.product_repository import ProductRepository
from src.domain.product import Product


class SqlAlchemyProductRepository(ProductRepository):
    """
    SQLAlchemy implementation of ProductRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Compare-and-decrement stock updates
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, product_id: str, for_update: bool = False) -> Optional[Product]:
        stmt = select(Product).where(Product.id == product_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(self, available_only: bool = False) -> List[Product]:
        stmt = select(Product)

        if available_only:
            stmt = stmt.where(Product.stock > 0)

        stmt = stmt.order_by(Product.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def update(self, product: Product) -> Product:
        product.updated_at = datetime.utcnow()
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """
        Take quantity bags out of stock if at least that many remain

        Note:
            Runs in the caller's transaction; a rollback restores the stock.
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .where(Product.stock >= quantity)
            .values(stock=Product.stock - quantity, updated_at=datetime.utcnow())
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
