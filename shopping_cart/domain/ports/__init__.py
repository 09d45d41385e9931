"""Port (interface) module."""
from .cart_repository import CartRepository
from .product_catalog import ProductCatalog

__all__ = [
    "CartRepository",
    "ProductCatalog",
]
