"""Catalog — the ordered collection of registered products.

Products are kept in arrival order. Names are not required to be unique:
lookup and removal always resolve to the first product with a matching
name (exact, case-sensitive).

The catalog itself does not log anything to the change log. Only the
InventoryManager holds a Catalog, and it records every mutation it makes.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.product import Product

logger = logging.getLogger(__name__)


class Catalog:

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    def register(self, product: Product) -> None:
        """Append a product at the end of the catalog."""
        self._products.append(product)
        logger.debug("Registered product %r", product.name)

    def remove(self, name: str) -> Product:
        """Remove and return the first product named *name*."""
        index = self._index_of(name)
        product = self._products.pop(index)
        logger.debug("Removed product %r", name)
        return product

    def find(self, name: str) -> Product:
        """Return the first product named *name*."""
        return self._products[self._index_of(name)]

    def list_sorted(self) -> list[Product]:
        """Return every product ordered by name.

        ``sorted`` is stable, so equal names keep their arrival order.
        The catalog's own order is left untouched.
        """
        return sorted(self._products, key=lambda p: p.name)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._products)

    def _index_of(self, name: str) -> int:
        for index, product in enumerate(self._products):
            if product.name == name:
                return index
        raise EntityNotFoundError(f"Product not found: '{name}'")
