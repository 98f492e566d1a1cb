"""Application service: Remove Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.service.inventory_manager import InventoryManager


class RemoveProductHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self, name: str) -> ProductDTO:
        """Remove the first product with this exact name.

        Raises EntityNotFoundError (and logs nothing) if there is none.
        """
        # Names are stored stripped, so look them up the same way.
        removed = self._manager.remove_product(name.strip())
        return ProductDTO.from_product(removed)
