"""Cart retrieval use case."""
from dataclasses import dataclass

from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository
from shopping_cart.domain.types import Amount
from shopping_cart.domain.value_objects import CartLine


@dataclass(frozen=True)
class CartView:
    """Cart contents for rendering."""

    cart_id: CartId
    lines: list[CartLine]
    total_items: int
    total_amount: Amount
    is_empty: bool

    def to_dict(self) -> dict:
        """Dictionary form for views."""
        return {
            "cart_id": str(self.cart_id),
            "lines": [line.to_dict() for line in self.lines],
            "total_items": self.total_items,
            "total_amount": self.total_amount,
            "is_empty": self.is_empty,
        }


class GetCartUseCase:
    """Cart retrieval use case."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: cart repository
        """
        self._cart_repository = cart_repository

    def execute(self, cart_id: CartId) -> CartView | None:
        """Read the cart.

        Args:
            cart_id: cart id

        Returns:
            cart view (None if the cart does not exist)
        """
        cart = self._cart_repository.find_by_id(cart_id)
        if cart is None:
            return None

        return CartView(
            cart_id=cart.cart_id,
            lines=cart.list(),
            total_items=cart.get_total_items(),
            total_amount=cart.get_total_amount(),
            is_empty=cart.is_empty(),
        )
