"""Catalog use cases"""
from .list_products import ListProducts
from .get_product import GetProduct
from .create_product import CreateProduct
from .update_product import UpdateProduct
from .dtos import (
    CreateProductCommandDTO,
    UpdateProductCommandDTO,
    ProductResponseDTO,
    ListProductsResponseDTO,
)

__all__ = [
    "ListProducts",
    "GetProduct",
    "CreateProduct",
    "UpdateProduct",
    "CreateProductCommandDTO",
    "UpdateProductCommandDTO",
    "ProductResponseDTO",
    "ListProductsResponseDTO",
]
