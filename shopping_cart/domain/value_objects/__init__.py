"""Value object module."""
from .cart_line import CartLine

__all__ = ["CartLine"]
