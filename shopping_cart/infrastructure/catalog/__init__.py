"""Catalog implementation module."""
from .demo_products import DEMO_PRODUCTS
from .in_memory_product_catalog import InMemoryProductCatalog

__all__ = ["DEMO_PRODUCTS", "InMemoryProductCatalog"]
