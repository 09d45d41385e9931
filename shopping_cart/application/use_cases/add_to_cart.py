"""Add-to-cart use case."""
import logging
from dataclasses import dataclass

from shopping_cart.domain.entities import Cart
from shopping_cart.domain.identifiers import CartId
from shopping_cart.domain.ports import CartRepository, ProductCatalog
from shopping_cart.domain.types import Amount

logger = logging.getLogger(__name__)


class CartNotFoundError(Exception):
    """Cart does not exist."""

    def __init__(self, cart_id: CartId) -> None:
        self.cart_id = cart_id
        super().__init__(f"Cart not found: {cart_id}")


class ProductNotFoundError(Exception):
    """Product id is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


@dataclass(frozen=True)
class CartSummary:
    """Cart totals after a mutation."""

    cart_id: CartId
    item_count: int
    total_amount: Amount

    @classmethod
    def of(cls, cart: Cart) -> "CartSummary":
        """Build a summary from the current cart state."""
        return cls(
            cart_id=cart.cart_id,
            item_count=cart.get_total_items(),
            total_amount=cart.get_total_amount(),
        )


def load_cart(cart_repository: CartRepository, cart_id: CartId) -> Cart:
    """Load a cart or raise CartNotFoundError."""
    cart = cart_repository.find_by_id(cart_id)
    if cart is None:
        raise CartNotFoundError(cart_id)
    return cart


class AddToCartUseCase:
    """Add a catalog product to a cart."""

    def __init__(self, cart_repository: CartRepository, product_catalog: ProductCatalog) -> None:
        """Initialize.

        Args:
            cart_repository: cart repository
            product_catalog: product catalog
        """
        self._cart_repository = cart_repository
        self._product_catalog = product_catalog

    def execute(self, cart_id: CartId, product_id: str, quantity: int = 1) -> CartSummary:
        """Add quantity units of a product to the cart.

        Args:
            cart_id: cart id
            product_id: catalog product id
            quantity: units to add

        Returns:
            cart summary

        Raises:
            ProductNotFoundError: product is not in the catalog
            CartNotFoundError: cart does not exist
            InvalidQuantity: resulting quantity is not a positive integer
        """
        product = self._product_catalog.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        cart = load_cart(self._cart_repository, cart_id)
        cart.add(product, quantity)
        self._cart_repository.save(cart)
        logger.info("Added %s x%d to cart %s", product_id, quantity, cart_id)

        return CartSummary.of(cart)
