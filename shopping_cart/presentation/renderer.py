"""Plain-text views of the catalog and the cart."""
from collections.abc import Iterable

from shopping_cart.application.use_cases import CartView
from shopping_cart.domain.entities import Product

from .currency import CurrencyFormatter

EMPTY_CART_MESSAGE = "Your cart is empty."


def render_products(products: Iterable[Product], fmt: CurrencyFormatter) -> str:
    """Render one card per product with its add action."""
    cards = [
        "\n".join(
            [
                f"== {product.name} ==",
                f"#{product.id}",
                fmt(product.price),
                f"[add:{product.id}] Add to cart",
            ]
        )
        for product in products
    ]
    return "\n\n".join(cards)


def render_cart(view: CartView, fmt: CurrencyFormatter) -> str:
    """Render the cart table followed by the totals."""
    if view.is_empty:
        rows = [EMPTY_CART_MESSAGE]
    else:
        rows = [
            " | ".join(
                [
                    line.id,
                    line.name,
                    str(line.quantity),
                    fmt(line.unit_price),
                    fmt(line.total),
                    f"[dec:{line.id}] - [inc:{line.id}] + [rem:{line.id}] Remove",
                ]
            )
            for line in view.lines
        ]
    rows.append(f"Items: {view.total_items}")
    rows.append(f"Total: {fmt(view.total_amount)}")
    return "\n".join(rows)
