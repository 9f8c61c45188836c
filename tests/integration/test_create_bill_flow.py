"""Integration tests for CreateBill against a real database"""

import pytest
from decimal import Decimal
from sqlmodel import select

from src.adapter.repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyBillRepository,
    SqlAlchemyBillItemRepository,
    SqlAlchemyBillSequenceRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.billing import CreateBill, BillItemCommandDTO, CreateBillCommandDTO
from src.domain.bill import Bill
from src.domain.bill_item import BillItem


class RaceLostProductRepository(SqlAlchemyProductRepository):
    """Decrements like the real repository, then reports that another bill won"""

    async def decrement_stock(self, product_id: str, quantity: int) -> bool:
        await super().decrement_stock(product_id, quantity)
        return False


class BrokenSequenceRepository(SqlAlchemyBillSequenceRepository):

    async def next_value(self) -> int:
        raise RuntimeError("sequence table unavailable")


def build_use_case(session, product_repo=None, sequence_repo=None) -> CreateBill:
    return CreateBill(
        uow=SqlAlchemyUnitOfWork(session),
        product_repo=product_repo or SqlAlchemyProductRepository(session),
        bill_repo=SqlAlchemyBillRepository(session),
        bill_item_repo=SqlAlchemyBillItemRepository(session),
        sequence_repo=sequence_repo or SqlAlchemyBillSequenceRepository(session),
    )


def cart(*lines, **overrides) -> CreateBillCommandDTO:
    data = dict(
        customer_name="Ramesh",
        items=[BillItemCommandDTO(product_id=pid, quantity=qty) for pid, qty in lines],
    )
    data.update(overrides)
    return CreateBillCommandDTO(**data)


@pytest.mark.asyncio
async def test_bill_decrements_stock_and_persists(db_session, products):
    """
    Given: Urea at 300 with 10 bags
    When: 3 bags are billed with 500 paid
    Then: Bill #1 is stored with due 400 and Urea has 7 bags left
    """
    urea = products["urea"]

    result = await build_use_case(db_session).execute(
        cart((urea.id, 3), paid_amount=Decimal("500"))
    )

    assert result.is_ok()
    assert result.value.bill_number == 1
    assert result.value.total_amount == Decimal("900.00")
    assert result.value.due_amount == Decimal("400.00")

    await db_session.refresh(urea)
    assert urea.stock == 7

    stored = (await db_session.execute(select(Bill))).scalars().all()
    assert len(stored) == 1
    items = (await db_session.execute(select(BillItem))).scalars().all()
    assert len(items) == 1
    assert items[0].bill_id == stored[0].id
    assert items[0].unit_price == Decimal("300.00")


@pytest.mark.asyncio
async def test_bill_numbers_are_sequential(db_session, products):
    use_case = build_use_case(db_session)
    urea = products["urea"]

    numbers = []
    for _ in range(3):
        result = await use_case.execute(cart((urea.id, 1)))
        assert result.is_ok()
        numbers.append(result.value.bill_number)

    assert numbers == [1, 2, 3]


@pytest.mark.asyncio
async def test_numbering_continues_after_existing_bills(db_session, products):
    db_session.add(
        Bill(
            bill_number=41,
            customer_name="Imported",
            subtotal_amount=Decimal("10.00"),
            total_amount=Decimal("10.00"),
            paid_amount=Decimal("10.00"),
            due_amount=Decimal("0.00"),
        )
    )
    await db_session.commit()

    result = await build_use_case(db_session).execute(cart((products["urea"].id, 1)))

    assert result.is_ok()
    assert result.value.bill_number == 42


@pytest.mark.asyncio
async def test_insufficient_stock_leaves_catalog_untouched(db_session, products):
    urea, dap = products["urea"], products["dap"]

    result = await build_use_case(db_session).execute(cart((urea.id, 3), (dap.id, 3)))

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_STOCK"

    await db_session.refresh(urea)
    await db_session.refresh(dap)
    assert urea.stock == 10
    assert dap.stock == 2
    assert (await db_session.execute(select(Bill))).scalars().all() == []


@pytest.mark.asyncio
async def test_failed_bill_does_not_consume_a_number(db_session, products):
    use_case = build_use_case(db_session)
    urea = products["urea"]

    failed = await use_case.execute(cart((urea.id, 1), paid_amount=Decimal("301")))
    assert failed.error.code == "OVER_PAYMENT"

    result = await use_case.execute(cart((urea.id, 1)))

    assert result.is_ok()
    assert result.value.bill_number == 1


@pytest.mark.asyncio
async def test_guarded_decrement_refuses_to_go_negative(db_session, products):
    repo = SqlAlchemyProductRepository(db_session)
    dap = products["dap"]

    assert await repo.decrement_stock(dap.id, 3) is False
    assert await repo.decrement_stock(dap.id, 2) is True
    await db_session.commit()

    await db_session.refresh(dap)
    assert dap.stock == 0


@pytest.mark.asyncio
async def test_stock_lost_to_concurrent_bill_is_reported_and_restored(db_session, products):
    """
    Given: Stock looked sufficient when the cart was validated
    When: The guarded decrement reports that another bill took the bags
    Then: INSUFFICIENT_STOCK names the product and the stock is rolled back
    """
    urea = products["urea"]
    use_case = build_use_case(
        db_session, product_repo=RaceLostProductRepository(db_session)
    )

    result = await use_case.execute(cart((urea.id, 1)))

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_STOCK"
    assert result.error.message == "Insufficient stock for Urea"

    await db_session.refresh(urea)
    assert urea.stock == 10
    assert (await db_session.execute(select(Bill))).scalars().all() == []


@pytest.mark.asyncio
async def test_failure_after_decrement_restores_every_product(db_session, products):
    urea, dap = products["urea"], products["dap"]
    use_case = build_use_case(
        db_session, sequence_repo=BrokenSequenceRepository(db_session)
    )

    result = await use_case.execute(cart((urea.id, 3), (dap.id, 1)))

    assert result.is_err()
    assert result.error.code == "CREATE_BILL_FAILED"

    await db_session.refresh(urea)
    await db_session.refresh(dap)
    assert urea.stock == 10
    assert dap.stock == 2
    assert (await db_session.execute(select(Bill))).scalars().all() == []
    assert (await db_session.execute(select(BillItem))).scalars().all() == []
