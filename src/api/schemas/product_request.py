"""Request schemas for Product API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from src.domain.product import PRODUCT_NAME_MAX_LENGTH, DEFAULT_BAG_WEIGHT


class CreateProductRequestSchema(BaseModel):
    """Used for POST /products endpoint"""

    name: str = Field(..., min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    price: Decimal = Field(..., ge=0)
    stock: int = Field(default=0, ge=0)
    bag_weight: int = Field(default=DEFAULT_BAG_WEIGHT, gt=0)
    category: Optional[str] = Field(default=None, max_length=60)

    class Config:
        json_schema_extra = {
            "example": {"name": "Urea", "price": "300.00", "stock": 10, "bag_weight": 50}
        }


class UpdateProductRequestSchema(BaseModel):
    """Used for PATCH /products/{product_id} endpoint"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    price: Optional[Decimal] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    bag_weight: Optional[int] = Field(default=None, gt=0)
    category: Optional[str] = Field(default=None, min_length=1, max_length=60)
