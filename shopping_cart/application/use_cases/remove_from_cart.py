"""Remove-from-cart use case."""
import logging

from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository

from .add_to_cart import CartSummary, load_cart

logger = logging.getLogger(__name__)


class RemoveFromCartUseCase:
    """Drop a product line from a cart."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: cart repository
        """
        self._cart_repository = cart_repository

    def execute(self, cart_id: CartId, product_id: str) -> CartSummary:
        """Remove the product's line; a missing product is not an error.

        Raises:
            CartNotFoundError: cart does not exist
        """
        cart = load_cart(self._cart_repository, cart_id)
        cart.remove(product_id)
        self._cart_repository.save(cart)
        logger.info("Removed %s from cart %s", product_id, cart_id)
        return CartSummary.of(cart)
