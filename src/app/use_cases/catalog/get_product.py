"""GetProduct Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.product_repository import ProductRepository
from .dtos import ProductResponseDTO


class GetProduct:
    """Use case: View one catalog product"""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, product_id: str) -> Result[ProductResponseDTO]:
        product = await self.product_repo.get_by_id(product_id)

        if not product:
            return Return.err(
                Error(
                    code="PRODUCT_NOT_FOUND",
                    message=f"Product with ID {product_id} not found",
                    reason="Product does not exist",
                )
            )

        return Return.ok(ProductResponseDTO.from_entity(product))
