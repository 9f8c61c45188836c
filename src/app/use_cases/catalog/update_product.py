"""UpdateProduct Use Case

Edits a catalog product (name, price, stock, bag weight, category).
"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.base import to_money
from .dtos import UpdateProductCommandDTO, ProductResponseDTO


class UpdateProduct:
    """
    Use Case: Edit a catalog product

    Fields left unset in the command keep their current value.
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, command: UpdateProductCommandDTO) -> Result[ProductResponseDTO]:
        name = command.name.strip() if command.name is not None else None
        if name == "":
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Product name cannot be blank",
                    reason="name is blank",
                )
            )

        category = command.category.strip() if command.category is not None else None
        if category == "":
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Product category cannot be blank",
                    reason="category is blank",
                )
            )

        try:
            product = await self.product_repo.get_by_id(command.product_id, for_update=True)

            if not product:
                return Return.err(
                    Error(
                        code="PRODUCT_NOT_FOUND",
                        message=f"Product with ID {command.product_id} not found",
                        reason="Product does not exist",
                    )
                )

            if name is not None:
                product.name = name
            if command.price is not None:
                product.price = to_money(command.price)
            if command.stock is not None:
                product.stock = command.stock
            if command.bag_weight is not None:
                product.bag_weight = command.bag_weight
            if category is not None:
                product.category = category

            updated = await self.product_repo.update(product)
            await self.uow.commit()

            return Return.ok(ProductResponseDTO.from_entity(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_PRODUCT_FAILED",
                    message="Failed to update product",
                    reason=str(e),
                )
            )
