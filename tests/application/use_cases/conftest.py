"""Shared fixtures for use case tests."""
import pytest

from shopping_cart.domain.entities import Cart, Product
from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository
from shopping_cart.infrastructure import InMemoryProductCatalog


class MockCartRepository(CartRepository):
    """Mock repository for tests."""

    def __init__(self) -> None:
        self._carts: dict[CartId, Cart] = {}
        self.save_count = 0

    def save(self, cart: Cart) -> None:
        self._carts[cart.cart_id] = cart
        self.save_count += 1

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        return self._carts.get(cart_id)

    def delete(self, cart_id: CartId) -> None:
        self._carts.pop(cart_id, None)


@pytest.fixture
def repository() -> MockCartRepository:
    return MockCartRepository()


@pytest.fixture
def catalog() -> InMemoryProductCatalog:
    return InMemoryProductCatalog(
        [
            Product("P001", "Laptop", 1200),
            Product("P002", "Mouse", 25.5),
        ]
    )


@pytest.fixture
def cart(repository) -> Cart:
    cart = Cart.create()
    repository.save(cart)
    return cart
