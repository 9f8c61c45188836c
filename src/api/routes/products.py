"""Product API Routes

FastAPI routes for the catalog.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError, error_response
from src.api.schemas.product_request import CreateProductRequestSchema, UpdateProductRequestSchema
from src.app.use_cases.catalog import (
    CreateProduct,
    GetProduct,
    ListProducts,
    UpdateProduct,
    CreateProductCommandDTO,
    UpdateProductCommandDTO,
    ProductResponseDTO,
    ListProductsResponseDTO,
)
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/products", tags=["Products"])

PRODUCT_NOT_FOUND = error_response("PRODUCT_NOT_FOUND", "Product with ID 4f8a... not found")


@router.get("", response_model=ListProductsResponseDTO)
async def list_products(
    available_only: bool = Query(True, description="Only products with stock > 0"),
    session: AsyncSession = Depends(get_session),
):
    """
    List catalog products ordered by name.

    The billing screen uses the default `available_only=true` so that
    out-of-stock products are not offered.
    """
    use_case = ListProducts(SqlAlchemyProductRepository(session))
    result = await use_case.execute(available_only=available_only)
    return result.value


@router.get(
    "/{product_id}",
    response_model=ProductResponseDTO,
    responses={404: PRODUCT_NOT_FOUND},
)
async def get_product(product_id: str, session: AsyncSession = Depends(get_session)):
    use_case = GetProduct(SqlAlchemyProductRepository(session))
    result = await use_case.execute(product_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=ProductResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    request: CreateProductRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Add a product to the catalog.

    `category` defaults to `<bag_weight>KG`.
    """
    command = CreateProductCommandDTO(**request.model_dump())

    use_case = CreateProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch(
    "/{product_id}",
    response_model=ProductResponseDTO,
    responses={404: PRODUCT_NOT_FOUND},
)
async def update_product(
    product_id: str,
    request: UpdateProductRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """Edit name, price, stock, bag weight or category of a product."""
    command = UpdateProductCommandDTO(
        product_id=product_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
