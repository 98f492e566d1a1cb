"""Application service: Add Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.model.product import Product
from ims.domain.service.inventory_manager import InventoryManager


class AddProductHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self, name: str, price: float, quantity: int) -> ProductDTO:
        """Register a new product in the catalog.

        No duplicate check is made: a second product with the same name
        is stored after the first one.
        """
        product = Product.create(name=name, price=price, quantity=quantity)
        self._manager.add_product(product)
        return ProductDTO.from_product(product)
