"""Application service: Show Product use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.service.inventory_manager import InventoryManager


class ShowProductHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self, name: str) -> ProductDTO:
        return ProductDTO.from_product(self._manager.find_product(name.strip()))
