"""ReportLab PDF Generation Service Implementation

Renders bills as A4 invoices using ReportLab.
"""

from io import BytesIO
from decimal import Decimal
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.bill import Bill, CustomerType
from src.domain.bill_item import BillItem

HEADER_COLOR = colors.HexColor("#2C3E50")
MUTED_COLOR = colors.HexColor("#7F8C8D")
GRID_COLOR = colors.HexColor("#BDC3C7")
DUE_COLOR = colors.HexColor("#C0392B")
PAID_COLOR = colors.HexColor("#1E8449")


def _quantity_label(item: BillItem) -> str:
    if item.bag_weight:
        return f"{item.bag_weight}kg x {item.quantity}"
    return str(item.quantity)


def _dash(value) -> str:
    return value if value else "-"


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Retailer bills print as a cash memo; wholesaler bills print as a tax
    invoice with GST fields and CGST/SGST/IGST rows.
    """

    def __init__(self):
        self._currency = "Rs."

    def generate_bill_invoice(
        self,
        bill: Bill,
        bill_items: List[BillItem],
        shop_name: str,
        shop_address: str = "",
        shop_phone: str = "",
        shop_gstin: str = "",
        currency: str = "Rs.",
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=15 * mm,
            leftMargin=15 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"Bill {bill.display_number}",
        )

        styles = getSampleStyleSheet()
        self._currency = currency
        wholesale = bill.customer_type == CustomerType.WHOLESALER

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            alignment=1,
            spaceAfter=4,
            textColor=HEADER_COLOR,
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=9,
            alignment=1,
            textColor=MUTED_COLOR,
        )
        label_style = ParagraphStyle(
            "LabelStyle",
            parent=styles["Heading2"],
            fontSize=13,
            alignment=1,
            spaceBefore=6,
            spaceAfter=10,
        )

        elements = []

        # Header - shop info and document label
        elements.append(Paragraph(shop_name, title_style))
        contact = " | ".join(part for part in (shop_address, shop_phone) if part)
        if contact:
            elements.append(Paragraph(contact, header_style))
        if wholesale and shop_gstin:
            elements.append(Paragraph(f"GSTIN: {shop_gstin}", header_style))
        elements.append(Paragraph("TAX INVOICE" if wholesale else "CASH / CREDIT MEMO", label_style))

        elements.append(self._details_table(bill, wholesale))
        elements.append(Spacer(1, 6 * mm))
        elements.append(self._items_table(bill, bill_items, wholesale))
        elements.append(Spacer(1, 2 * mm))
        elements.append(self._totals_table(bill, wholesale))
        elements.append(Spacer(1, 15 * mm))

        elements.append(
            Paragraph(
                "<i>Goods once sold will not be taken back.</i>",
                ParagraphStyle(
                    "FooterNote",
                    parent=styles["Normal"],
                    fontSize=8,
                    textColor=MUTED_COLOR,
                ),
            )
        )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    def _money(self, amount) -> str:
        return f"{self._currency} {Decimal(amount or 0):,.2f}"

    def _details_table(self, bill: Bill, wholesale: bool) -> Table:
        created = bill.created_at.strftime("%d/%m/%Y")
        if wholesale:
            rows = [
                ["Customer's Name", bill.customer_name.upper(), "Book No.", _dash(bill.book_no)],
                ["Address", _dash(bill.customer_address), "Bill No.", bill.display_number],
                ["Mobile", _dash(bill.customer_phone), "Date", created],
                ["CST", _dash(bill.customer_cst), "Vehicle No.", _dash(bill.vehicle_no)],
                ["TIN", _dash(bill.customer_tin), "Supplier's Ref", _dash(bill.supplier_ref)],
                ["GSTIN ID", _dash(bill.customer_gstin), "", ""],
            ]
        else:
            rows = [
                ["Name", bill.customer_name, "Bill No.", bill.display_number],
                ["Address", _dash(bill.customer_address), "Date", created],
                ["Mobile", _dash(bill.customer_phone), "", ""],
            ]

        table = Table(rows, colWidths=[30 * mm, 65 * mm, 30 * mm, 55 * mm])
        table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTNAME", (2, 0), (2, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("TEXTCOLOR", (0, 0), (0, -1), MUTED_COLOR),
                    ("TEXTCOLOR", (2, 0), (2, -1), MUTED_COLOR),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
                ]
            )
        )
        return table

    def _items_table(self, bill: Bill, bill_items: List[BillItem], wholesale: bool) -> Table:
        if wholesale:
            data = [["S.No", "Description of Goods", "HSN", "Qty", "Rate", "Amount"]]
            for index, item in enumerate(bill_items, start=1):
                data.append(
                    [
                        str(index),
                        item.product_name,
                        _dash(bill.hsn_code),
                        _quantity_label(item),
                        self._money(item.unit_price),
                        self._money(item.line_total),
                    ]
                )
            col_widths = [12 * mm, 58 * mm, 22 * mm, 26 * mm, 30 * mm, 32 * mm]
        else:
            data = [["S.No", "Particulars", "Qty", "Rate", "Amount"]]
            for index, item in enumerate(bill_items, start=1):
                data.append(
                    [
                        str(index),
                        item.product_name,
                        _quantity_label(item),
                        self._money(item.unit_price),
                        self._money(item.line_total),
                    ]
                )
            col_widths = [12 * mm, 80 * mm, 26 * mm, 30 * mm, 32 * mm]

        table = Table(data, colWidths=col_widths, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("ALIGN", (-3, 1), (-1, -1), "RIGHT"),
                    ("ALIGN", (0, 1), (0, -1), "CENTER"),
                    # Grid
                    ("GRID", (0, 0), (-1, -1), 0.5, GRID_COLOR),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        return table

    def _totals_table(self, bill: Bill, wholesale: bool) -> Table:
        if wholesale:
            rows = [
                ["Total", self._money(bill.subtotal_amount)],
                ["CGST", self._money(bill.cgst)],
                ["SGST", self._money(bill.sgst)],
                ["IGST", self._money(bill.igst)],
                ["Paid", self._money(bill.paid_amount)],
                ["Due", self._money(bill.due_amount)],
                ["Grand Total", self._money(bill.total_amount)],
            ]
        else:
            rows = [
                ["Total", self._money(bill.total_amount)],
                ["Paid", self._money(bill.paid_amount)],
                ["Due", self._money(bill.due_amount)],
            ]

        paid_row = len(rows) - (3 if wholesale else 2)
        due_row = paid_row + 1
        last = len(rows) - 1

        table = Table(rows, colWidths=[148 * mm, 32 * mm])
        table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTNAME", (0, last), (-1, last), "Helvetica-Bold"),
                    ("TEXTCOLOR", (1, paid_row), (1, paid_row), PAID_COLOR),
                    ("TEXTCOLOR", (1, due_row), (1, due_row), DUE_COLOR),
                    ("LINEABOVE", (0, last), (-1, last), 1.5, HEADER_COLOR),
                    ("TOPPADDING", (0, 0), (-1, -1), 3),
                ]
            )
        )
        return table
