"""In-memory product catalog."""
import logging
from collections.abc import Iterable

from shopping_cart.domain.entities import Product
from shopping_cart.domain.ports import ProductCatalog

from .demo_products import DEMO_PRODUCTS

logger = logging.getLogger(__name__)


class InMemoryProductCatalog(ProductCatalog):
    """Fixed catalog loaded once at startup."""

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        """Initialize.

        Args:
            products: catalog products (demo data when omitted)

        Raises:
            ValueError: two products share an id
        """
        self._products: dict[str, Product] = {}
        for product in DEMO_PRODUCTS if products is None else products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id in catalog: {product.id}")
            self._products[product.id] = product
        logger.debug("Loaded catalog with %d products", len(self._products))

    def list_products(self) -> list[Product]:
        """Return every product in catalog order."""
        return list(self._products.values())

    def find_by_id(self, product_id: str) -> Product | None:
        """Find a product by id."""
        return self._products.get(product_id)
