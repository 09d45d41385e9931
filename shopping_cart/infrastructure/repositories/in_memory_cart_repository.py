"""In-memory cart repository."""
import logging

from shopping_cart.domain.entities import Cart
from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository

logger = logging.getLogger(__name__)


class InMemoryCartRepository(CartRepository):
    """Cart repository that lives as long as the process (one session).

    Carts are keyed by their CartId, which compares by value, so an id
    rebuilt from its string form finds the same cart.
    """

    def __init__(self) -> None:
        """Initialize."""
        self._carts: dict[CartId, Cart] = {}

    def save(self, cart: Cart) -> None:
        """Save a cart."""
        self._carts[cart.cart_id] = cart
        logger.debug("Saved cart %s (%d lines)", cart.cart_id, len(cart))

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """Find a cart by id."""
        return self._carts.get(cart_id)

    def delete(self, cart_id: CartId) -> None:
        """Delete a cart; unknown ids are ignored."""
        if self._carts.pop(cart_id, None) is not None:
            logger.debug("Deleted cart %s", cart_id)

    def count(self) -> int:
        """Number of carts held."""
        return len(self._carts)
