"""Unit tests for Bill domain entity and money helpers"""

from decimal import Decimal
from src.domain.base import to_money
from src.domain.bill import Bill, CustomerType


def make_bill(**overrides) -> Bill:
    data = dict(
        bill_number=7,
        customer_name="Ramesh Traders",
        subtotal_amount=Decimal("900.00"),
        total_amount=Decimal("900.00"),
        paid_amount=Decimal("500.00"),
        due_amount=Decimal("400.00"),
    )
    data.update(overrides)
    return Bill(**data)


class TestBill:

    def test_defaults_to_retailer_without_taxes(self):
        bill = make_bill()

        assert bill.customer_type == CustomerType.RETAILER
        assert bill.cgst == Decimal("0.00")
        assert bill.sgst == Decimal("0.00")
        assert bill.igst == Decimal("0.00")

    def test_is_due(self):
        assert make_bill().is_due is True
        assert make_bill(paid_amount=Decimal("900.00"), due_amount=Decimal("0.00")).is_due is False

    def test_display_number_is_zero_padded(self):
        assert make_bill(bill_number=7).display_number == "0007"
        assert make_bill(bill_number=12345).display_number == "12345"


class TestToMoney:

    def test_none_is_zero(self):
        assert to_money(None) == Decimal("0.00")

    def test_rounds_half_up_to_paise(self):
        assert to_money(Decimal("10.005")) == Decimal("10.01")
        assert to_money("2.344") == Decimal("2.34")

    def test_int_and_float(self):
        assert to_money(300) == Decimal("300.00")
        assert to_money(0.1) == Decimal("0.10")
