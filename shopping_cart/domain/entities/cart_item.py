"""Cart line entity."""
from __future__ import annotations

from ..exceptions import InvalidProduct, InvalidQuantity
from ..types import Amount
from .product import Product


def ensure_quantity(quantity: object) -> int:
    """Return the quantity if it is a positive integer, else raise InvalidQuantity."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantity(f"Quantity must be a positive integer, got {quantity!r}")
    return quantity


class CartItem:
    """A product held in the cart together with a positive quantity.

    The product is shared with the catalog and never copied. The quantity
    can be reassigned, but only to another positive integer; dropping an
    item to zero is the cart's job (it removes the item instead).
    """

    __slots__ = ("_product", "_quantity")

    def __init__(self, product: Product, quantity: int = 1) -> None:
        """Initialize.

        Raises:
            InvalidProduct: product is not a Product
            InvalidQuantity: quantity is not a positive integer
        """
        if not isinstance(product, Product):
            raise InvalidProduct("CartItem requires a Product")
        self._product = product
        self._quantity = ensure_quantity(quantity)

    @property
    def product(self) -> Product:
        """Catalog product of this line."""
        return self._product

    @property
    def quantity(self) -> int:
        """Units of the product."""
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        """Set the quantity; it must stay a positive integer."""
        self._quantity = ensure_quantity(value)

    def total_price(self) -> Amount:
        """Unit price times quantity, computed on demand."""
        return self._product.price * self._quantity

    def __repr__(self) -> str:
        """Debug representation."""
        return f"CartItem(product={self._product!r}, quantity={self._quantity})"
