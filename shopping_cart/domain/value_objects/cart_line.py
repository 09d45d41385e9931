"""Read-only cart line snapshot."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..types import Amount


@dataclass(frozen=True)
class CartLine:
    """One cart item projected for display at a given instant."""

    id: str
    name: str
    unit_price: Amount
    quantity: int
    total: Amount

    def to_dict(self) -> dict[str, Any]:
        """Dictionary form with camelCase keys for views."""
        return {
            "id": self.id,
            "name": self.name,
            "unitPrice": self.unit_price,
            "quantity": self.quantity,
            "total": self.total,
        }
