"""Catalog listing use case."""
from shopping_cart.domain.entities import Product
from shopping_cart.domain.ports import ProductCatalog


class ListProductsUseCase:
    """List the purchasable products."""

    def __init__(self, product_catalog: ProductCatalog) -> None:
        """Initialize."""
        self._product_catalog = product_catalog

    def execute(self) -> list[Product]:
        """Return the catalog in display order."""
        return self._product_catalog.list_products()
