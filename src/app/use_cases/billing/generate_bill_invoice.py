"""GenerateBillInvoice Use Case

Renders a printable invoice PDF for a bill.
"""

import base64
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.bill_item_repository import BillItemRepository
from src.app.services.pdf_service import PdfService
from src.domain.bill import CustomerType
from .dtos import BillInvoiceResponseDTO


class GenerateBillInvoice:
    """
    Use Case: Print a bill

    Business Rules:
    1. Bill must exist
    2. Retailer bills print as a memo, wholesaler bills as a tax invoice
    3. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve bill by ID
    2. Retrieve bill line items
    3. Generate PDF using PDF service
    4. Return response with PDF as base64
    """

    def __init__(
        self,
        bill_repo: BillRepository,
        bill_item_repo: BillItemRepository,
        pdf_service: PdfService,
        shop_name: str,
        shop_address: str = "",
        shop_phone: str = "",
        shop_gstin: str = "",
        currency: str = "Rs.",
    ):
        self.bill_repo = bill_repo
        self.bill_item_repo = bill_item_repo
        self.pdf_service = pdf_service
        self.shop_name = shop_name
        self.shop_address = shop_address
        self.shop_phone = shop_phone
        self.shop_gstin = shop_gstin
        self.currency = currency

    async def execute(self, bill_id: str) -> Result[BillInvoiceResponseDTO]:
        """
        Execute invoice generation

        Args:
            bill_id: Bill to print

        Returns:
            Result[BillInvoiceResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve bill
            bill = await self.bill_repo.get_by_id(bill_id)

            if not bill:
                return Return.err(
                    Error(
                        code="BILL_NOT_FOUND",
                        message=f"Bill with ID {bill_id} not found",
                        reason="Bill does not exist",
                    )
                )

            # Step 2: Retrieve line items
            bill_items = await self.bill_item_repo.get_by_bill_id(bill.id)

            # Step 3: Generate PDF
            pdf_bytes = self.pdf_service.generate_bill_invoice(
                bill=bill,
                bill_items=bill_items,
                shop_name=self.shop_name,
                shop_address=self.shop_address,
                shop_phone=self.shop_phone,
                shop_gstin=self.shop_gstin,
                currency=self.currency,
            )

            # Step 4: Build response
            return Return.ok(
                BillInvoiceResponseDTO(
                    bill_id=bill.id,
                    bill_number=bill.bill_number,
                    display_number=bill.display_number,
                    customer_type=CustomerType(bill.customer_type).value,
                    total_amount=bill.total_amount,
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=datetime.utcnow(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_INVOICE_FAILED",
                    message="Failed to generate invoice",
                    reason=str(e),
                )
            )
