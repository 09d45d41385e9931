"""Quantity increase use case."""
from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository, ProductCatalog

from .add_to_cart import AddToCartUseCase, CartSummary


class IncreaseQuantityUseCase:
    """Add one more unit of a product (the "+" action)."""

    def __init__(self, cart_repository: CartRepository, product_catalog: ProductCatalog) -> None:
        """Initialize.

        Args:
            cart_repository: cart repository
            product_catalog: product catalog
        """
        self._add_to_cart = AddToCartUseCase(cart_repository, product_catalog)

    def execute(self, cart_id: CartId, product_id: str) -> CartSummary:
        """Increase the product's quantity by one.

        Raises:
            ProductNotFoundError: product is not in the catalog
            CartNotFoundError: cart does not exist
        """
        return self._add_to_cart.execute(cart_id, product_id, 1)
