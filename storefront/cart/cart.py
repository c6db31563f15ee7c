"""
In-memory cart for one menu session.

Lines are unique by (item_id, variation_id) and keep insertion order. Names,
prices and currencies are copied from the catalog when a line is first added
and never re-fetched.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from storefront.integrations.contracts.interfaces import CatalogItem, CatalogVariation


@dataclass
class CartLine:
    item_id: str
    variation_id: str
    name: str
    variation_name: str
    price: float                         # major currency units
    currency: str
    quantity: int = 1

    @property
    def key(self) -> Tuple[str, str]:
        return (self.item_id, self.variation_id)

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class Cart:
    def __init__(self) -> None:
        self._lines: List[CartLine] = []

    # --- Mutations -------------------------------------------------------------

    def add(self, item: CatalogItem, variation: CatalogVariation) -> Optional[CartLine]:
        """Add one unit. Unavailable variations are ignored and return None."""
        if not variation.available:
            return None

        line = self._find(item.item_id, variation.variation_id)
        if line is not None:
            line.quantity += 1
            return line

        line = CartLine(
            item_id=item.item_id,
            variation_id=variation.variation_id,
            name=item.name,
            variation_name=variation.name,
            price=variation.price / 100,
            currency=variation.currency,
            quantity=1,
        )
        self._lines.append(line)
        return line

    def update_quantity(self, item_id: str, variation_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove(item_id, variation_id)
            return

        line = self._find(item_id, variation_id)
        if line is not None:
            line.quantity = quantity

    def remove(self, item_id: str, variation_id: str) -> None:
        self._lines = [line for line in self._lines if line.key != (item_id, variation_id)]

    def clear(self) -> None:
        self._lines = []

    # --- Queries ---------------------------------------------------------------

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get(self, item_id: str, variation_id: str) -> Optional[CartLine]:
        return self._find(item_id, variation_id)

    def total(self) -> float:
        # Mixed currencies are summed as plain numbers; no conversion is attempted.
        return math.fsum(line.subtotal for line in self._lines)

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def currencies(self) -> List[str]:
        seen: List[str] = []
        for line in self._lines:
            if line.currency not in seen:
                seen.append(line.currency)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [
                {
                    "itemId": line.item_id,
                    "variationId": line.variation_id,
                    "name": line.name,
                    "variationName": line.variation_name,
                    "price": line.price,
                    "currency": line.currency,
                    "quantity": line.quantity,
                    "subtotal": line.subtotal,
                }
                for line in self._lines
            ],
            "total": self.total(),
            "totalFormatted": format_price(self.total()),
            "totalQuantity": self.item_count(),
            "currencies": self.currencies(),
            "isEmpty": self.is_empty,
        }

    def __len__(self) -> int:
        return len(self._lines)

    def _find(self, item_id: str, variation_id: str) -> Optional[CartLine]:
        for line in self._lines:
            if line.item_id == item_id and line.variation_id == variation_id:
                return line
        return None


def format_price(amount: float) -> str:
    return f"${amount:,.2f}"
