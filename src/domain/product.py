"""Product Domain Entity

Catalog entry for a bagged product with its current stock.
"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Integer, Numeric, String
from src.domain.base import BaseModel, generate_uuid

PRODUCT_NAME_MAX_LENGTH = 60
DEFAULT_BAG_WEIGHT = 50


class Product(BaseModel, table=True):
    """
    Product - Catalog item sold in bags

    Domain Rules:
    - name is required, at most 60 characters
    - price is non-negative
    - stock counts bags and never goes negative
    - bag_weight is kilograms per bag (positive)
    - Billing only mutates stock, through a guarded decrement
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint('stock >= 0', name='stock_non_negative'),
        CheckConstraint('price >= 0', name='price_non_negative'),
        CheckConstraint('bag_weight > 0', name='bag_weight_positive'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque product identifier"
    )

    name: str = Field(
        sa_column=Column(String(PRODUCT_NAME_MAX_LENGTH), nullable=False, index=True),
        description="Product name (max 60 characters)"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Price per bag"
    )

    stock: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Bags in stock"
    )

    bag_weight: int = Field(
        default=DEFAULT_BAG_WEIGHT,
        sa_column=Column(Integer, nullable=False, default=DEFAULT_BAG_WEIGHT),
        description="Kilograms per bag"
    )

    category: str = Field(
        sa_column=Column(String(60), nullable=False),
        description="Product category (e.g. '50KG')"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "4f8a7e0c-4a56-4f53-9d0e-3c8e5f1b2a11",
                "name": "Urea",
                "price": "300.00",
                "stock": 10,
                "bag_weight": 50,
                "category": "50KG",
            }
        }


def default_category(bag_weight: int) -> str:
    """Category label used when none is given"""
    return f"{bag_weight}KG"
