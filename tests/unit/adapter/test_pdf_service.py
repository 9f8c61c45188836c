"""Unit tests for ReportLab invoice rendering"""

from decimal import Decimal
from src.adapter.services.pdf_service import ReportLabPdfService, _quantity_label
from src.domain.bill import Bill, CustomerType
from src.domain.bill_item import BillItem


def make_bill(customer_type: CustomerType) -> Bill:
    wholesale = customer_type == CustomerType.WHOLESALER
    return Bill(
        id="b1",
        bill_number=12,
        customer_name="Ramesh Traders",
        customer_phone="9876543210",
        customer_type=customer_type,
        customer_gstin="27ABCDE1234F1Z5" if wholesale else None,
        hsn_code="3102" if wholesale else None,
        cgst=Decimal("22.50") if wholesale else Decimal("0.00"),
        sgst=Decimal("22.50") if wholesale else Decimal("0.00"),
        subtotal_amount=Decimal("900.00"),
        total_amount=Decimal("945.00") if wholesale else Decimal("900.00"),
        paid_amount=Decimal("500.00"),
        due_amount=Decimal("445.00") if wholesale else Decimal("400.00"),
    )


def make_items():
    return [
        BillItem(
            bill_id="b1",
            product_id="urea",
            product_name="Urea",
            quantity=3,
            unit_price=Decimal("300.00"),
            bag_weight=50,
            line_total=Decimal("900.00"),
        )
    ]


class TestReportLabPdfService:

    def test_retail_memo_is_a_pdf(self):
        pdf = ReportLabPdfService().generate_bill_invoice(
            bill=make_bill(CustomerType.RETAILER),
            bill_items=make_items(),
            shop_name="Krishi Seva Kendra",
        )

        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 1000

    def test_wholesale_tax_invoice_is_a_pdf(self):
        pdf = ReportLabPdfService().generate_bill_invoice(
            bill=make_bill(CustomerType.WHOLESALER),
            bill_items=make_items(),
            shop_name="Krishi Seva Kendra",
            shop_address="Main Market Road",
            shop_phone="020-2345678",
            shop_gstin="27AAAAA0000A1Z5",
        )

        assert pdf.startswith(b"%PDF")


class TestQuantityLabel:

    def test_with_bag_weight(self):
        assert _quantity_label(make_items()[0]) == "50kg x 3"

    def test_without_bag_weight(self):
        item = make_items()[0]
        item.bag_weight = None
        assert _quantity_label(item) == "3"
