"""Product Repository Interface

Defines the contract for catalog persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.product import Product


class ProductRepository(ABC):
    """
    Repository interface for Product persistence

    Stock is only changed through decrement_stock, which must never drive
    it below zero.
    """

    @abstractmethod
    async def get_by_id(self, product_id: str, for_update: bool = False) -> Optional[Product]:
        """
        Retrieve product by ID

        Args:
            product_id: Product identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Product if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(self, available_only: bool = False) -> List[Product]:
        """
        List products ordered by name

        Args:
            available_only: If True, only products with stock > 0

        Returns:
            List of products
        """
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Persist a new product"""
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Persist changes to an existing product"""
        pass

    @abstractmethod
    async def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """
        Atomically take quantity bags out of stock

        Args:
            product_id: Product identifier
            quantity: Bags to remove (> 0)

        Returns:
            True if stock was decremented, False if the product is missing
            or holds fewer than quantity bags (nothing changed)
        """
        pass
