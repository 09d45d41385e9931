"""Infrastructure layer module."""
from .catalog import DEMO_PRODUCTS, InMemoryProductCatalog
from .repositories import InMemoryCartRepository

__all__ = [
    "DEMO_PRODUCTS",
    "InMemoryCartRepository",
    "InMemoryProductCatalog",
]
