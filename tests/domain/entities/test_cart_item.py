"""CartItem tests."""
import pytest

from shopping_cart.domain.entities import CartItem, Product
from shopping_cart.domain.exceptions import InvalidProduct, InvalidQuantity


@pytest.fixture
def mouse() -> Product:
    return Product("P002", "Mouse", 25.5)


class TestCartItem:
    """CartItem unit tests."""

    def test_default_quantity_is_one(self, mouse) -> None:
        """Quantity defaults to 1."""
        assert CartItem(mouse).quantity == 1

    def test_product_is_shared_not_copied(self, mouse) -> None:
        """The item references the same Product object."""
        assert CartItem(mouse, 2).product is mouse

    def test_non_product_is_rejected(self) -> None:
        """Passing something other than a Product raises InvalidProduct."""
        with pytest.raises(InvalidProduct):
            CartItem({"id": "P002", "name": "Mouse", "price": 25.5})  # type: ignore[arg-type]

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", None, True])
    def test_invalid_quantity_is_rejected(self, mouse, quantity) -> None:
        """Non-positive or non-integer quantities raise InvalidQuantity."""
        with pytest.raises(InvalidQuantity, match="positive integer"):
            CartItem(mouse, quantity)

    def test_quantity_can_be_reassigned(self, mouse) -> None:
        """Quantity can be set to another positive integer."""
        item = CartItem(mouse, 1)
        item.quantity = 4
        assert item.quantity == 4

    @pytest.mark.parametrize("quantity", [0, -3, 2.0])
    def test_invalid_reassignment_is_rejected_and_keeps_value(self, mouse, quantity) -> None:
        """Invalid reassignment raises InvalidQuantity and leaves the quantity unchanged."""
        item = CartItem(mouse, 3)
        with pytest.raises(InvalidQuantity):
            item.quantity = quantity
        assert item.quantity == 3

    def test_total_price_is_recomputed(self, mouse) -> None:
        """total_price follows the current quantity."""
        item = CartItem(mouse, 2)
        assert item.total_price() == 51.0
        item.quantity = 3
        assert item.total_price() == 76.5
