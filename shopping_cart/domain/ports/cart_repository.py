"""Cart repository interface."""
from abc import ABC, abstractmethod

from ..entities import Cart
from ..identifiers import CartId


class CartRepository(ABC):
    """Cart repository interface."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Save a cart."""
        pass

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """Find a cart by id."""
        pass

    @abstractmethod
    def delete(self, cart_id: CartId) -> None:
        """Delete a cart."""
        pass
