"""Supplier Payment API Routes

FastAPI routes for the supplier payment ledger.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError, error_response
from src.api.schemas.payment_request import (
    CreateSupplierPaymentRequestSchema,
    AmendSupplierPaymentRequestSchema,
)
from src.app.use_cases.payments import (
    CreateSupplierPayment,
    AmendSupplierPayment,
    DeleteSupplierPayment,
    ListSupplierPayments,
    CreateSupplierPaymentCommandDTO,
    AmendSupplierPaymentCommandDTO,
    SupplierPaymentResponseDTO,
    ListSupplierPaymentsResponseDTO,
)
from src.adapter.repositories.supplier_payment_repository import SqlAlchemySupplierPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.supplier_payment import PaymentMode, PaymentStatus
from src.depends import get_session

router = APIRouter(prefix="/payments", tags=["Supplier Payments"])

PAYMENT_NOT_FOUND = error_response("PAYMENT_NOT_FOUND", "Payment with ID c3b9... not found")


@router.get("", response_model=ListSupplierPaymentsResponseDTO)
async def list_payments(
    search: Optional[str] = Query(None, description="Company name or reference number"),
    status_filter: Optional[PaymentStatus] = Query(None, alias="status"),
    payment_mode: Optional[PaymentMode] = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    """Supplier payments, most recent payment date first."""
    use_case = ListSupplierPayments(SqlAlchemySupplierPaymentRepository(session))
    result = await use_case.execute(
        search=search,
        status=status_filter,
        payment_mode=payment_mode,
        limit=limit,
        offset=offset,
    )
    return result.value


@router.post(
    "",
    response_model=SupplierPaymentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: error_response("INVALID_PAYMENT_STATUS", "Only a cheque without an amount can be pending"),
    },
)
async def create_payment(
    request: CreateSupplierPaymentRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Record a payment to a supplier.

    A CHEQUE with amount 0 is stored as a PENDING blank cheque.
    """
    command = CreateSupplierPaymentCommandDTO(**request.model_dump())

    use_case = CreateSupplierPayment(
        SqlAlchemyUnitOfWork(session), SqlAlchemySupplierPaymentRepository(session)
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch(
    "/{payment_id}",
    response_model=SupplierPaymentResponseDTO,
    responses={404: PAYMENT_NOT_FOUND},
)
async def amend_payment(
    payment_id: str,
    request: AmendSupplierPaymentRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """Fill in or correct a payment; an amount above 0 completes it."""
    command = AmendSupplierPaymentCommandDTO(
        payment_id=payment_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = AmendSupplierPayment(
        SqlAlchemyUnitOfWork(session), SqlAlchemySupplierPaymentRepository(session)
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{payment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: PAYMENT_NOT_FOUND},
)
async def delete_payment(payment_id: str, session: AsyncSession = Depends(get_session)):
    use_case = DeleteSupplierPayment(
        SqlAlchemyUnitOfWork(session), SqlAlchemySupplierPaymentRepository(session)
    )
    result = await use_case.execute(payment_id)

    if result.is_err():
        raise ClientError(result.error)
