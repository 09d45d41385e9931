"""User intent handlers.

Each handler runs one use case and then re-reads the cart so the caller can
re-render. Intents use the keys of the original action buttons:

    {"add": "P001"}  add one unit from the catalog
    {"inc": "P001"}  "+" on a cart line
    {"dec": "P001"}  "-" on a cart line
    {"rem": "P001"}  "Remove" on a cart line

Domain validation errors (InvalidProduct, InvalidQuantity) are not handled
here; they propagate to the caller.
"""
import logging
from typing import Any

from shopping_cart.application.use_cases import (
    AddToCartUseCase,
    CartNotFoundError,
    CreateCartUseCase,
    DecreaseQuantityUseCase,
    GetCartUseCase,
    IncreaseQuantityUseCase,
    ListProductsUseCase,
    ProductNotFoundError,
    RemoveFromCartUseCase,
)
from shopping_cart.domain.identifiers import CartId

from .dependencies import Dependencies
from .renderer import render_cart, render_products
from .response import bad_request_response, not_found_response, success_response

logger = logging.getLogger(__name__)

INTENT_KEYS = ("add", "inc", "dec", "rem")


def _to_cart_id(cart_id: CartId | str) -> CartId:
    return cart_id if isinstance(cart_id, CartId) else CartId(cart_id)


def _cart_body(cart_id: CartId) -> dict[str, Any] | None:
    """Read the cart back and render it."""
    view = GetCartUseCase(Dependencies.get_cart_repository()).execute(cart_id)
    if view is None:
        return None
    return {
        "cart": view.to_dict(),
        "rendered": render_cart(view, Dependencies.get_currency_formatter()),
    }


def start_session() -> dict[str, Any]:
    """Create an empty cart and render the catalog and the cart.

    Returns:
        response with cart_id, catalog, cart and rendered text
    """
    cart_id = CreateCartUseCase(Dependencies.get_cart_repository()).execute()
    products = ListProductsUseCase(Dependencies.get_product_catalog()).execute()
    fmt = Dependencies.get_currency_formatter()

    body = _cart_body(cart_id) or {}
    return success_response(
        {
            "cart_id": str(cart_id),
            "products": [
                {"id": product.id, "name": product.name, "price": product.price}
                for product in products
            ],
            "rendered_products": render_products(products, fmt),
            **body,
        }
    )


def get_cart(cart_id: CartId | str) -> dict[str, Any]:
    """Return the current cart state."""
    cart_id = _to_cart_id(cart_id)
    body = _cart_body(cart_id)
    if body is None:
        return not_found_response("Cart", "CART_NOT_FOUND")
    return success_response(body)


def handle_intent(intent: dict[str, Any], cart_id: CartId | str) -> dict[str, Any]:
    """Dispatch one user intent to the cart and return the re-rendered state.

    Args:
        intent: dictionary with exactly one of the add/inc/dec/rem keys
        cart_id: session cart id

    Returns:
        response with the cart after the mutation
    """
    actions = [key for key in INTENT_KEYS if intent.get(key)]
    if len(actions) != 1:
        logger.warning("Rejected intent %r", intent)
        return bad_request_response(f"Intent must contain exactly one of {', '.join(INTENT_KEYS)}")

    action = actions[0]
    product_id = intent[action]
    if not isinstance(product_id, str):
        return bad_request_response(f"{action} must be a product id string")

    cart_id = _to_cart_id(cart_id)
    repository = Dependencies.get_cart_repository()
    catalog = Dependencies.get_product_catalog()

    try:
        if action == "add":
            AddToCartUseCase(repository, catalog).execute(cart_id, product_id, 1)
        elif action == "inc":
            IncreaseQuantityUseCase(repository, catalog).execute(cart_id, product_id)
        elif action == "dec":
            DecreaseQuantityUseCase(repository).execute(cart_id, product_id, 1)
        else:
            RemoveFromCartUseCase(repository).execute(cart_id, product_id)
    except CartNotFoundError:
        logger.warning("Intent %s for unknown cart %s", action, cart_id)
        return not_found_response("Cart", "CART_NOT_FOUND")
    except ProductNotFoundError:
        logger.warning("Intent %s for unknown product %s", action, product_id)
        return not_found_response("Product", "PRODUCT_NOT_FOUND", _cart_body(cart_id))

    return success_response(_cart_body(cart_id) or {})
