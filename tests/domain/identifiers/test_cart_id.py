"""CartId tests."""
import pytest

from shopping_cart.domain.identifiers import CartId


class TestCartId:
    """CartId unit tests."""

    def test_created_from_string(self) -> None:
        """A CartId wraps a non-empty string."""
        assert CartId("cart-1").value == "cart-1"

    def test_empty_is_rejected(self) -> None:
        """An empty value raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            CartId("")

    def test_generate_is_unique(self) -> None:
        """generate() gives a different id each time."""
        assert CartId.generate() != CartId.generate()

    def test_str(self) -> None:
        """str() returns the value."""
        assert str(CartId("cart-1")) == "cart-1"
