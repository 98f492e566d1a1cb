"""Application service: List Products use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.service.inventory_manager import InventoryManager


class ListProductsHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> list[ProductDTO]:
        """Every product, sorted by name."""
        return [ProductDTO.from_product(p) for p in self._manager.list_products()]
