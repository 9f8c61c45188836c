"""Unit tests for SupplierPayment domain entity"""

from decimal import Decimal
from src.domain.supplier_payment import (
    SupplierPayment,
    PaymentMode,
    PaymentStatus,
    is_blank_cheque,
)


class TestSupplierPayment:

    def test_defaults(self):
        payment = SupplierPayment(company_name="IFFCO", amount=Decimal("5000.00"))

        assert payment.payment_mode == PaymentMode.ONLINE
        assert payment.status == PaymentStatus.COMPLETED
        assert payment.reference_no == ""
        assert payment.note == ""
        assert payment.date is not None


class TestIsBlankCheque:

    def test_cheque_without_amount(self):
        assert is_blank_cheque(Decimal("0"), PaymentMode.CHEQUE) is True

    def test_cheque_with_amount(self):
        assert is_blank_cheque(Decimal("10.00"), PaymentMode.CHEQUE) is False

    def test_other_modes_are_never_blank_cheques(self):
        for mode in (PaymentMode.ONLINE, PaymentMode.CASH, PaymentMode.UPI):
            assert is_blank_cheque(Decimal("0"), mode) is False
