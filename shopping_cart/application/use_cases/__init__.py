"""Use case module."""
from .add_to_cart import (
    AddToCartUseCase,
    CartNotFoundError,
    CartSummary,
    ProductNotFoundError,
)
from .create_cart import CreateCartUseCase
from .decrease_quantity import DecreaseQuantityUseCase
from .get_cart import CartView, GetCartUseCase
from .increase_quantity import IncreaseQuantityUseCase
from .list_products import ListProductsUseCase
from .remove_from_cart import RemoveFromCartUseCase

__all__ = [
    "AddToCartUseCase",
    "CartNotFoundError",
    "CartSummary",
    "CartView",
    "CreateCartUseCase",
    "DecreaseQuantityUseCase",
    "GetCartUseCase",
    "IncreaseQuantityUseCase",
    "ListProductsUseCase",
    "ProductNotFoundError",
    "RemoveFromCartUseCase",
]
