"""
List Products Use Case

The billing screen only offers products that still have stock.
"""
from libs.result import Result, Return
from src.app.repositories.product_repository import ProductRepository
from .dtos import ListProductsResponseDTO, ProductResponseDTO


class ListProducts:
    """Use case: Browse the catalog, ordered by name"""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, available_only: bool = True) -> Result[ListProductsResponseDTO]:
        """
        List catalog products.

        Args:
            available_only: If True, only products with stock > 0

        Returns:
            Result[ListProductsResponseDTO]
        """
        products = await self.product_repo.list(available_only=available_only)

        return Return.ok(
            ListProductsResponseDTO(
                products=[ProductResponseDTO.from_entity(p) for p in products],
                total=len(products),
            )
        )
