"""Unit tests for RecordBillPayment use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.record_bill_payment import RecordBillPayment
from src.app.use_cases.billing.dtos import RecordBillPaymentCommandDTO
from src.domain.bill import Bill


@pytest.fixture
def existing_bill():
    return Bill(
        id="bill-1",
        bill_number=1,
        customer_name="Ramesh",
        subtotal_amount=Decimal("900.00"),
        total_amount=Decimal("900.00"),
        paid_amount=Decimal("500.00"),
        due_amount=Decimal("400.00"),
    )


@pytest.fixture
def mock_bill_repo(existing_bill):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=existing_bill)
    repo.update = AsyncMock(side_effect=lambda bill: bill)
    return repo


@pytest.fixture
def mock_bill_item_repo():
    repo = MagicMock()
    repo.get_by_bill_id = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def record_payment_use_case(mock_uow, mock_bill_repo, mock_bill_item_repo):
    return RecordBillPayment(
        uow=mock_uow,
        bill_repo=mock_bill_repo,
        bill_item_repo=mock_bill_item_repo,
    )


@pytest.mark.asyncio
class TestRecordBillPayment:

    async def test_partial_payment(self, record_payment_use_case, mock_bill_repo, mock_uow):
        result = await record_payment_use_case.execute(
            RecordBillPaymentCommandDTO(bill_id="bill-1", amount=Decimal("150"))
        )

        assert result.is_ok()
        assert result.value.paid_amount == Decimal("650.00")
        assert result.value.due_amount == Decimal("250.00")
        assert result.value.is_due is True
        mock_bill_repo.get_by_id.assert_called_once_with("bill-1", for_update=True)
        mock_uow.commit.assert_called_once()

    async def test_payment_settles_bill(self, record_payment_use_case):
        result = await record_payment_use_case.execute(
            RecordBillPaymentCommandDTO(bill_id="bill-1", amount=Decimal("400"))
        )

        assert result.is_ok()
        assert result.value.paid_amount == Decimal("900.00")
        assert result.value.due_amount == Decimal("0.00")
        assert result.value.is_due is False

    async def test_over_payment_leaves_bill_unchanged(
        self, record_payment_use_case, mock_bill_repo, existing_bill, mock_uow
    ):
        result = await record_payment_use_case.execute(
            RecordBillPaymentCommandDTO(bill_id="bill-1", amount=Decimal("400.01"))
        )

        assert result.is_err()
        assert result.error.code == "OVER_PAYMENT"
        assert existing_bill.paid_amount == Decimal("500.00")
        assert existing_bill.due_amount == Decimal("400.00")
        mock_bill_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-10"), Decimal("0.004")])
    async def test_non_positive_amount(self, record_payment_use_case, mock_bill_repo, amount):
        result = await record_payment_use_case.execute(
            RecordBillPaymentCommandDTO(bill_id="bill-1", amount=amount)
        )

        assert result.is_err()
        assert result.error.code == "INVALID_AMOUNT"
        mock_bill_repo.get_by_id.assert_not_called()

    async def test_unknown_bill(self, record_payment_use_case, mock_bill_repo):
        mock_bill_repo.get_by_id = AsyncMock(return_value=None)

        result = await record_payment_use_case.execute(
            RecordBillPaymentCommandDTO(bill_id="nope", amount=Decimal("10"))
        )

        assert result.is_err()
        assert result.error.code == "BILL_NOT_FOUND"

    async def test_storage_failure_rolls_back(self, record_payment_use_case, mock_bill_repo, mock_uow):
        mock_bill_repo.update = AsyncMock(side_effect=RuntimeError("disk full"))

        result = await record_payment_use_case.execute(
            RecordBillPaymentCommandDTO(bill_id="bill-1", amount=Decimal("10"))
        )

        assert result.is_err()
        assert result.error.code == "RECORD_PAYMENT_FAILED"
        mock_uow.rollback.assert_called_once()
