"""Data Transfer Objects for Catalog Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.product import Product, PRODUCT_NAME_MAX_LENGTH, DEFAULT_BAG_WEIGHT


class CreateProductCommandDTO(BaseModel):
    """
    Command DTO for adding a product to the catalog

    category defaults to '<bag_weight>KG' when omitted.
    """

    name: str = Field(..., min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    price: Decimal = Field(..., ge=0, description="Price per bag")
    stock: int = Field(default=0, ge=0, description="Bags in stock")
    bag_weight: int = Field(default=DEFAULT_BAG_WEIGHT, gt=0, description="Kilograms per bag")
    category: Optional[str] = Field(default=None, max_length=60)


class UpdateProductCommandDTO(BaseModel):
    """
    Command DTO for editing a product

    Only the fields that are set are changed.
    """

    product_id: str
    name: Optional[str] = Field(default=None, min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    price: Optional[Decimal] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    bag_weight: Optional[int] = Field(default=None, gt=0)
    category: Optional[str] = Field(default=None, min_length=1, max_length=60)


class ProductResponseDTO(BaseModel):
    """Catalog entry as returned by the catalog use cases"""

    product_id: str
    name: str
    price: Decimal
    stock: int
    bag_weight: int
    category: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponseDTO":
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            bag_weight=product.bag_weight,
            category=product.category,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "product_id": "4f8a7e0c-4a56-4f53-9d0e-3c8e5f1b2a11",
                "name": "Urea",
                "price": "300.00",
                "stock": 10,
                "bag_weight": 50,
                "category": "50KG",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z",
            }
        }


class ListProductsResponseDTO(BaseModel):
    products: List[ProductResponseDTO]
    total: int
