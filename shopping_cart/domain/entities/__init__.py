"""Entity module."""
from .cart import Cart
from .cart_item import CartItem
from .product import Product

__all__ = [
    "Cart",
    "CartItem",
    "Product",
]
