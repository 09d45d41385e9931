"""Cart creation use case."""
import logging

from shopping_cart.domain.entities import Cart
from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository

logger = logging.getLogger(__name__)


class CreateCartUseCase:
    """Start a session with a new empty cart."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: cart repository
        """
        self._cart_repository = cart_repository

    def execute(self) -> CartId:
        """Create and save an empty cart.

        Returns:
            id of the new cart
        """
        cart = Cart.create()
        self._cart_repository.save(cart)
        logger.info("Created cart %s", cart.cart_id)
        return cart.cart_id
