"""Product tests."""
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from shopping_cart.domain.entities import Product
from shopping_cart.domain.exceptions import InvalidProduct


class TestProduct:
    """Product unit tests."""

    def test_valid_product_is_created(self) -> None:
        """A product with id, name and non-negative price can be created."""
        product = Product("P001", "Laptop", 1200)
        assert product.id == "P001"
        assert product.name == "Laptop"
        assert product.price == 1200

    @pytest.mark.parametrize("price", [0, 25.5, 279.99])
    def test_zero_int_and_float_prices_are_accepted(self, price) -> None:
        """Zero, int and float prices are valid."""
        assert Product("P001", "Laptop", price).price == price

    @pytest.mark.parametrize("product_id", ["", None, 1])
    def test_invalid_id_is_rejected(self, product_id) -> None:
        """An empty, missing or non-string id raises InvalidProduct."""
        with pytest.raises(InvalidProduct, match="id"):
            Product(product_id, "Laptop", 10)

    @pytest.mark.parametrize("name", ["", None])
    def test_invalid_name_is_rejected(self, name) -> None:
        """An empty or missing name raises InvalidProduct."""
        with pytest.raises(InvalidProduct, match="name"):
            Product("P001", name, 10)

    @pytest.mark.parametrize(
        "price", [-1, -0.01, "10", None, True, float("nan"), float("inf"), Decimal("10"), Decimal("NaN")]
    )
    def test_invalid_price_is_rejected(self, price) -> None:
        """Negative, non-numeric, non-finite and Decimal prices raise InvalidProduct."""
        with pytest.raises(InvalidProduct, match="price"):
            Product("P001", "Laptop", price)

    def test_invalid_product_is_a_value_error(self) -> None:
        """InvalidProduct can be caught as ValueError."""
        with pytest.raises(ValueError):
            Product("", "Laptop", 10)

    def test_fields_are_read_only(self) -> None:
        """Fields cannot be reassigned after construction."""
        product = Product("P001", "Laptop", 1200)
        with pytest.raises(FrozenInstanceError):
            product.price = 1  # type: ignore[misc]

    def test_products_with_same_fields_are_equal(self) -> None:
        """Products compare by value."""
        assert Product("P001", "Laptop", 1200) == Product("P001", "Laptop", 1200)
        assert Product("P001", "Laptop", 1200) != Product("P001", "Laptop", 1100)

    def test_str(self) -> None:
        """String representation shows name and id."""
        assert str(Product("P001", "Laptop", 1200)) == "Laptop (#P001)"
