"""PDF Generation Service Interface

Defines the contract for rendering printable bills.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.bill import Bill
from src.domain.bill_item import BillItem


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders a bill as a printable invoice.
    """

    @abstractmethod
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
        """
        Generate an invoice PDF for a bill

        Retailer bills get a cash-memo layout; wholesaler bills get a tax
        invoice layout with GST details.

        Args:
            bill: Bill with customer details and totals
            bill_items: Line items of the bill, in bill order
            shop_name: Shop name printed in the header
            shop_address: Shop address printed under the name
            shop_phone: Shop phone number
            shop_gstin: Shop GSTIN (printed on tax invoices)
            currency: Currency label prefixed to amounts

        Returns:
            PDF document as bytes
        """
        pass
