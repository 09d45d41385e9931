"""Identifier module."""
from .cart_id import CartId

__all__ = ["CartId"]
