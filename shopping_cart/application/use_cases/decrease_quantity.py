"""Quantity decrease use case."""
import logging

from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository

from .add_to_cart import CartSummary, load_cart

logger = logging.getLogger(__name__)


class DecreaseQuantityUseCase:
    """Take units of a product out of a cart."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: cart repository
        """
        self._cart_repository = cart_repository

    def execute(self, cart_id: CartId, product_id: str, quantity: int = 1) -> CartSummary:
        """Decrease the product's quantity; the line is dropped at zero.

        A product that is not in the cart is left alone.

        Args:
            cart_id: cart id
            product_id: product id
            quantity: units to take out

        Returns:
            cart summary

        Raises:
            CartNotFoundError: cart does not exist
        """
        cart = load_cart(self._cart_repository, cart_id)
        before = cart.get_quantity(product_id)
        cart.decrease(product_id, quantity)
        self._cart_repository.save(cart)

        if before == 0:
            logger.debug("Decrease ignored, %s not in cart %s", product_id, cart_id)
        elif not cart.contains(product_id):
            logger.info("Removed %s from cart %s (quantity reached zero)", product_id, cart_id)
        else:
            logger.info("Decreased %s by %d in cart %s", product_id, quantity, cart_id)

        return CartSummary.of(cart)
