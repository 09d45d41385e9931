"""Repository implementation module."""
from .in_memory_cart_repository import InMemoryCartRepository

__all__ = ["InMemoryCartRepository"]
