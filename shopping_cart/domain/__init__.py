"""Domain layer module."""
from .entities import Cart, CartItem, Product
from .exceptions import CartDomainError, InvalidProduct, InvalidQuantity
from .identifiers import CartId
from .ports import CartRepository, ProductCatalog
from .value_objects import CartLine

__all__ = [
    # Identifiers
    "CartId",
    # Value Objects
    "CartLine",
    # Entities
    "Cart",
    "CartItem",
    "Product",
    # Errors
    "CartDomainError",
    "InvalidProduct",
    "InvalidQuantity",
    # Ports
    "CartRepository",
    "ProductCatalog",
]
