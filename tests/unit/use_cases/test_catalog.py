"""Unit tests for catalog use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.catalog import (
    CreateProduct,
    GetProduct,
    ListProducts,
    UpdateProduct,
    CreateProductCommandDTO,
    UpdateProductCommandDTO,
)
from src.domain.product import Product


@pytest.fixture
def urea():
    return Product(
        id="urea",
        name="Urea",
        price=Decimal("300.00"),
        stock=10,
        bag_weight=50,
        category="50KG",
    )


@pytest.fixture
def mock_product_repo(urea):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=urea)
    repo.list = AsyncMock(return_value=[urea])
    repo.create = AsyncMock(side_effect=lambda product: product)
    repo.update = AsyncMock(side_effect=lambda product: product)
    return repo


@pytest.mark.asyncio
class TestListProducts:

    async def test_available_only_by_default(self, mock_product_repo):
        result = await ListProducts(mock_product_repo).execute()

        assert result.is_ok()
        assert result.value.total == 1
        assert result.value.products[0].name == "Urea"
        mock_product_repo.list.assert_called_once_with(available_only=True)


@pytest.mark.asyncio
class TestGetProduct:

    async def test_missing_product(self, mock_product_repo):
        mock_product_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetProduct(mock_product_repo).execute("nope")

        assert result.is_err()
        assert result.error.code == "PRODUCT_NOT_FOUND"


@pytest.mark.asyncio
class TestCreateProduct:

    async def test_category_defaults_from_bag_weight(self, mock_uow, mock_product_repo):
        command = CreateProductCommandDTO(name=" DAP ", price=Decimal("1350"), stock=5, bag_weight=45)

        result = await CreateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_ok()
        assert result.value.name == "DAP"
        assert result.value.category == "45KG"
        assert result.value.price == Decimal("1350.00")
        mock_uow.commit.assert_called_once()

    async def test_blank_name(self, mock_uow, mock_product_repo):
        command = CreateProductCommandDTO(name="   ", price=Decimal("1"))

        result = await CreateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_product_repo.create.assert_not_called()

    async def test_storage_failure(self, mock_uow, mock_product_repo):
        mock_product_repo.create = AsyncMock(side_effect=RuntimeError("locked"))
        command = CreateProductCommandDTO(name="DAP", price=Decimal("1350"))

        result = await CreateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_err()
        assert result.error.code == "CREATE_PRODUCT_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestUpdateProduct:

    async def test_only_given_fields_change(self, mock_uow, mock_product_repo):
        command = UpdateProductCommandDTO(product_id="urea", stock=25)

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_ok()
        assert result.value.stock == 25
        assert result.value.price == Decimal("300.00")
        assert result.value.name == "Urea"
        mock_uow.commit.assert_called_once()

    async def test_missing_product(self, mock_uow, mock_product_repo):
        mock_product_repo.get_by_id = AsyncMock(return_value=None)

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(
            UpdateProductCommandDTO(product_id="nope", price=Decimal("1"))
        )

        assert result.is_err()
        assert result.error.code == "PRODUCT_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_blank_category_is_rejected(self, mock_uow, mock_product_repo, urea):
        command = UpdateProductCommandDTO(product_id="urea", category="   ")

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert urea.category == "50KG"
        mock_product_repo.get_by_id.assert_not_called()
        mock_product_repo.update.assert_not_called()
