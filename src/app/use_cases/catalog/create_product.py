"""CreateProduct Use Case

Adds a product to the catalog.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.base import to_money
from src.domain.product import Product, default_category
from .dtos import CreateProductCommandDTO, ProductResponseDTO

logger = logging.getLogger(__name__)


class CreateProduct:
    """
    Use Case: Add a catalog product

    Business Rules:
    1. Name is required (max 60 characters)
    2. Price and stock are non-negative, bag weight positive
    3. Category defaults to '<bag_weight>KG'
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, command: CreateProductCommandDTO) -> Result[ProductResponseDTO]:
        name = command.name.strip()
        if not name:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Please provide a name for this product",
                    reason="name is blank",
                )
            )

        try:
            product = Product(
                name=name,
                price=to_money(command.price),
                stock=command.stock,
                bag_weight=command.bag_weight,
                category=(command.category or "").strip() or default_category(command.bag_weight),
            )
            created = await self.product_repo.create(product)
            await self.uow.commit()

            logger.info(f"Product {created.name} added with stock {created.stock}")
            return Return.ok(ProductResponseDTO.from_entity(created))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_PRODUCT_FAILED",
                    message="Failed to create product",
                    reason=str(e),
                )
            )
