"""Bill API Routes

FastAPI routes for billing: checkout, history, payments and invoices.
"""

import base64
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.error import ClientError, error_response
from src.api.schemas.bill_request import CreateBillRequestSchema, RecordBillPaymentRequestSchema
from src.app.repositories.bill_repository import PaidFilter
from src.app.use_cases.billing import (
    CreateBill,
    RecordBillPayment,
    GetBill,
    ListBills,
    GenerateBillInvoice,
    BillItemCommandDTO,
    CreateBillCommandDTO,
    RecordBillPaymentCommandDTO,
    BillResponseDTO,
    ListBillsResponseDTO,
    BillInvoiceResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyBillRepository,
    SqlAlchemyBillItemRepository,
    SqlAlchemyBillSequenceRepository,
)
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/bills", tags=["Bills"])

BILL_NOT_FOUND = error_response("BILL_NOT_FOUND", "Bill with ID 0b9f... not found")


def _invoice_use_case(session: AsyncSession) -> GenerateBillInvoice:
    return GenerateBillInvoice(
        bill_repo=SqlAlchemyBillRepository(session),
        bill_item_repo=SqlAlchemyBillItemRepository(session),
        pdf_service=ReportLabPdfService(),
        shop_name=ApplicationConfig.SHOP_NAME,
        shop_address=ApplicationConfig.SHOP_ADDRESS,
        shop_phone=ApplicationConfig.SHOP_PHONE,
        shop_gstin=ApplicationConfig.SHOP_GSTIN,
        currency=ApplicationConfig.CURRENCY_LABEL,
    )


@router.post(
    "",
    response_model=BillResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: error_response("PRODUCT_NOT_FOUND", "Product not found: Urea"),
        400: error_response("INSUFFICIENT_STOCK", "Insufficient stock for Urea"),
        409: error_response("BILL_NUMBER_CONFLICT", "Another bill was created at the same time, please retry"),
    },
)
async def create_bill(
    request: CreateBillRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Create a bill from a cart.

    Stock is checked for every line before anything changes; the bill is
    priced from the catalog. Stock decrement, bill number and bill are
    committed together.

    **Returns:**
    - 201: Bill created
    - 400: Insufficient stock, over-payment or invalid customer
    - 404: A product in the cart does not exist
    - 409: Concurrent bill numbering conflict, retry
    """
    command = CreateBillCommandDTO(
        **request.model_dump(exclude={"items"}),
        items=[BillItemCommandDTO(**item.model_dump()) for item in request.items],
    )

    use_case = CreateBill(
        uow=SqlAlchemyUnitOfWork(session),
        product_repo=SqlAlchemyProductRepository(session),
        bill_repo=SqlAlchemyBillRepository(session),
        bill_item_repo=SqlAlchemyBillItemRepository(session),
        sequence_repo=SqlAlchemyBillSequenceRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListBillsResponseDTO)
async def list_bills(
    search: Optional[str] = Query(None, description="Customer name or bill number"),
    paid_filter: PaidFilter = Query(PaidFilter.ALL, description="ALL, PAID or DUE"),
    type_filter: str = Query("ALL", pattern="^(ALL|RETAILER|WHOLESALER)$"),
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_LIMIT, ge=1, le=ApplicationConfig.MAX_PAGE_LIMIT),
    session: AsyncSession = Depends(get_session),
):
    """Bill history, newest first."""
    use_case = ListBills(SqlAlchemyBillRepository(session), SqlAlchemyBillItemRepository(session))
    result = await use_case.execute(
        search=search,
        paid_filter=paid_filter,
        type_filter=type_filter,
        page=page,
        limit=limit,
    )
    return result.value


@router.get("/{bill_id}", response_model=BillResponseDTO, responses={404: BILL_NOT_FOUND})
async def get_bill(bill_id: str, session: AsyncSession = Depends(get_session)):
    use_case = GetBill(SqlAlchemyBillRepository(session), SqlAlchemyBillItemRepository(session))
    result = await use_case.execute(bill_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/{bill_id}/payments",
    response_model=BillResponseDTO,
    responses={
        404: BILL_NOT_FOUND,
        400: error_response("OVER_PAYMENT", "Payment exceeds due amount"),
    },
)
async def record_bill_payment(
    bill_id: str,
    request: RecordBillPaymentRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Record money received against a bill.

    **Returns:**
    - 200: Updated bill
    - 400: Amount not positive (INVALID_AMOUNT) or larger than the due (OVER_PAYMENT)
    - 404: Bill not found
    """
    command = RecordBillPaymentCommandDTO(bill_id=bill_id, amount=request.amount)

    use_case = RecordBillPayment(
        uow=SqlAlchemyUnitOfWork(session),
        bill_repo=SqlAlchemyBillRepository(session),
        bill_item_repo=SqlAlchemyBillItemRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{bill_id}/invoice",
    response_model=BillInvoiceResponseDTO,
    responses={404: BILL_NOT_FOUND},
)
async def get_bill_invoice(bill_id: str, session: AsyncSession = Depends(get_session)):
    """Printable invoice, PDF embedded as base64."""
    result = await _invoice_use_case(session).execute(bill_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{bill_id}/invoice/pdf",
    responses={
        200: {"content": {"application/pdf": {}}, "description": "PDF document"},
        404: BILL_NOT_FOUND,
    },
)
async def download_bill_invoice_pdf(bill_id: str, session: AsyncSession = Depends(get_session)):
    """Printable invoice as a PDF file."""
    result = await _invoice_use_case(session).execute(bill_id)

    if result.is_err():
        raise ClientError(result.error)

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=bill_{result.value.display_number}.pdf"
        },
    )
