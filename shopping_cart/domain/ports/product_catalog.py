"""Product catalog interface."""
from abc import ABC, abstractmethod

from ..entities import Product


class ProductCatalog(ABC):
    """Read-only source of the products purchasable in a session."""

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product in catalog order."""
        pass

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Find a product by id."""
        pass
