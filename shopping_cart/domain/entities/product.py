"""Product entity."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..exceptions import InvalidProduct
from ..types import Amount


def _is_valid_price(price: object) -> bool:
    """Whether the value is a finite, non-negative number."""
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price) and price >= 0


@dataclass(frozen=True)
class Product:
    """A sellable catalog item; immutable once constructed."""

    id: str
    name: str
    price: Amount

    def __post_init__(self) -> None:
        """Validate."""
        if not isinstance(self.id, str) or not self.id:
            raise InvalidProduct("Product id must be a non-empty string")
        if not isinstance(self.name, str) or not self.name:
            raise InvalidProduct("Product name must be a non-empty string")
        if not _is_valid_price(self.price):
            raise InvalidProduct(f"Invalid product price: {self.price!r}")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.name} (#{self.id})"
