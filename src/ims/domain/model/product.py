"""Product value.

Products are never updated field by field: a product is registered,
removed, or restored as a whole. Keeping the dataclass frozen means the
copy stored in the change log is a true snapshot.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for user-supplied values; the ``__init__``
    does not validate so tests and undo can rebuild snapshots freely.
    """

    name: str
    price: float
    quantity: int

    @staticmethod
    def create(name: str, price: float | int, quantity: int) -> Product:
        """Create a product, enforcing all field rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationError(
                f"Product price must be a number, got {type(price).__name__}"
            )
        if not math.isfinite(price):
            raise ValidationError(f"Product price must be a finite number, got {price}")
        if price < 0:
            raise ValidationError(f"Product price cannot be negative, got {price}")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(
                f"Product quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError(
                f"Product quantity cannot be negative, got {quantity}"
            )
        return Product(name=name.strip(), price=float(price), quantity=quantity)

    def __str__(self) -> str:
        return f"{self.name}:{self.price:g}:{self.quantity}"
