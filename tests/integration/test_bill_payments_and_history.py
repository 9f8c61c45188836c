"""Integration tests for bill payments and bill history"""

import pytest
from decimal import Decimal

from src.adapter.repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyBillRepository,
    SqlAlchemyBillItemRepository,
    SqlAlchemyBillSequenceRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.bill_repository import PaidFilter
from src.app.use_cases.billing import (
    CreateBill,
    ListBills,
    RecordBillPayment,
    BillItemCommandDTO,
    CreateBillCommandDTO,
    RecordBillPaymentCommandDTO,
)
from src.domain.bill import CustomerType


async def create_bill(session, product, quantity, paid, name="Ramesh", **extra):
    use_case = CreateBill(
        uow=SqlAlchemyUnitOfWork(session),
        product_repo=SqlAlchemyProductRepository(session),
        bill_repo=SqlAlchemyBillRepository(session),
        bill_item_repo=SqlAlchemyBillItemRepository(session),
        sequence_repo=SqlAlchemyBillSequenceRepository(session),
    )
    result = await use_case.execute(
        CreateBillCommandDTO(
            customer_name=name,
            items=[BillItemCommandDTO(product_id=product.id, quantity=quantity)],
            paid_amount=Decimal(paid),
            **extra,
        )
    )
    assert result.is_ok()
    return result.value


def record_payment_use_case(session) -> RecordBillPayment:
    return RecordBillPayment(
        uow=SqlAlchemyUnitOfWork(session),
        bill_repo=SqlAlchemyBillRepository(session),
        bill_item_repo=SqlAlchemyBillItemRepository(session),
    )


@pytest.mark.asyncio
async def test_payment_flow_until_settled(db_session, products):
    bill = await create_bill(db_session, products["urea"], 3, "500")
    use_case = record_payment_use_case(db_session)

    first = await use_case.execute(
        RecordBillPaymentCommandDTO(bill_id=bill.bill_id, amount=Decimal("150"))
    )
    assert first.is_ok()
    assert first.value.due_amount == Decimal("250.00")

    over = await use_case.execute(
        RecordBillPaymentCommandDTO(bill_id=bill.bill_id, amount=Decimal("300"))
    )
    assert over.is_err()
    assert over.error.code == "OVER_PAYMENT"

    final = await use_case.execute(
        RecordBillPaymentCommandDTO(bill_id=bill.bill_id, amount=Decimal("250"))
    )
    assert final.is_ok()
    assert final.value.paid_amount == Decimal("900.00")
    assert final.value.due_amount == Decimal("0.00")
    assert len(final.value.items) == 1


@pytest.mark.asyncio
async def test_payment_does_not_touch_stock(db_session, products):
    urea = products["urea"]
    bill = await create_bill(db_session, urea, 2, "0")

    await record_payment_use_case(db_session).execute(
        RecordBillPaymentCommandDTO(bill_id=bill.bill_id, amount=Decimal("100"))
    )

    await db_session.refresh(urea)
    assert urea.stock == 8


@pytest.mark.asyncio
async def test_history_filters(db_session, products):
    urea = products["urea"]
    await create_bill(db_session, urea, 1, "300", name="Ramesh Traders")
    await create_bill(db_session, urea, 1, "0", name="Suresh")
    await create_bill(
        db_session,
        urea,
        1,
        "0",
        name="Mahesh Agro",
        customer_type=CustomerType.WHOLESALER,
        cgst=Decimal("7.50"),
        sgst=Decimal("7.50"),
    )

    use_case = ListBills(SqlAlchemyBillRepository(db_session), SqlAlchemyBillItemRepository(db_session))

    everything = (await use_case.execute()).value
    assert everything.total == 3
    assert [b.bill_number for b in everything.bills] == [3, 2, 1]

    due = (await use_case.execute(paid_filter=PaidFilter.DUE)).value
    assert {b.customer_name for b in due.bills} == {"Suresh", "Mahesh Agro"}

    paid = (await use_case.execute(paid_filter=PaidFilter.PAID)).value
    assert [b.customer_name for b in paid.bills] == ["Ramesh Traders"]

    wholesale = (await use_case.execute(type_filter="WHOLESALER")).value
    assert wholesale.total == 1
    assert wholesale.bills[0].total_amount == Decimal("315.00")

    by_name = (await use_case.execute(search="ramesh")).value
    assert [b.customer_name for b in by_name.bills] == ["Ramesh Traders"]

    by_number = (await use_case.execute(search="2")).value
    assert [b.bill_number for b in by_number.bills] == [2]

    second_page = (await use_case.execute(page=2, limit=2)).value
    assert second_page.total == 3
    assert [b.bill_number for b in second_page.bills] == [1]


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(db_session, products):
    urea = products["urea"]
    await create_bill(db_session, urea, 1, "0", name="Ramesh")
    await create_bill(db_session, urea, 1, "0", name="Shree_Agro")
    await create_bill(db_session, urea, 1, "0", name="100% Kisan")

    use_case = ListBills(SqlAlchemyBillRepository(db_session), SqlAlchemyBillItemRepository(db_session))

    underscore = (await use_case.execute(search="_")).value
    assert [b.customer_name for b in underscore.bills] == ["Shree_Agro"]

    percent = (await use_case.execute(search="%")).value
    assert [b.customer_name for b in percent.bills] == ["100% Kisan"]
