"""Cart aggregate root."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import InvalidProduct, InvalidQuantity
from ..identifiers import CartId
from ..types import Amount
from ..value_objects import CartLine
from .cart_item import CartItem
from .product import Product


def _ensure_integer(value: object, name: str) -> int:
    """Return value if it is an int (bools excluded), else raise InvalidQuantity."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantity(f"{name} must be an integer, got {value!r}")
    return value


@dataclass
class Cart:
    """Products selected during one session, with their quantities (aggregate root).

    Items are keyed by product id. A dict keeps first-add order, which is
    also the display order, and it is not changed by later quantity updates.
    """

    cart_id: CartId = field(default_factory=CartId.generate)
    _items: dict[str, CartItem] = field(default_factory=dict)

    @classmethod
    def create(cls) -> Cart:
        """Create a new empty cart."""
        return cls(cart_id=CartId.generate(), _items={})

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        """Add a product, merging with an existing line for the same product id."""
        if not isinstance(product, Product):
            raise InvalidProduct("Cart.add requires a Product")
        _ensure_integer(quantity, "quantity")

        existing = self._items.get(product.id)
        if existing is not None:
            existing.quantity = existing.quantity + quantity
            return existing

        item = CartItem(product, quantity)
        self._items[product.id] = item
        return item

    def remove(self, product_id: str) -> None:
        """Remove the line for product_id; does nothing if absent."""
        self._items.pop(product_id, None)

    def decrease(self, product_id: str, qty: int = 1) -> None:
        """Decrease a line's quantity, removing the line once it reaches zero or below."""
        item = self._items.get(product_id)
        if item is None:
            return
        next_quantity = item.quantity - _ensure_integer(qty, "qty")
        if next_quantity <= 0:
            self.remove(product_id)
        else:
            item.quantity = next_quantity

    def clear(self) -> None:
        """Remove every line."""
        self._items.clear()

    def get_total_items(self) -> int:
        """Number of units in the cart (not distinct products)."""
        return sum(item.quantity for item in self._items.values())

    def get_total_amount(self) -> Amount:
        """Sum of every line total."""
        return sum((item.total_price() for item in self._items.values()), 0)

    def list(self) -> list[CartLine]:
        """Snapshot of the cart lines in first-add order."""
        return [
            CartLine(
                id=item.product.id,
                name=item.product.name,
                unit_price=item.product.price,
                quantity=item.quantity,
                total=item.total_price(),
            )
            for item in self._items.values()
        ]

    def contains(self, product_id: str) -> bool:
        """Whether the cart holds a line for product_id."""
        return product_id in self._items

    def get_quantity(self, product_id: str) -> int:
        """Quantity held for product_id (0 when absent)."""
        item = self._items.get(product_id)
        return item.quantity if item is not None else 0

    def is_empty(self) -> bool:
        """Whether the cart has no lines."""
        return not self._items

    def __len__(self) -> int:
        """Number of distinct products in the cart."""
        return len(self._items)
