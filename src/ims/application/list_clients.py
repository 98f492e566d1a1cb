"""Application service: List Waiting Clients use case (query)."""

from __future__ import annotations

from ims.application.dto import ClientDTO
from ims.domain.service.inventory_manager import InventoryManager


class ListClientsHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> list[ClientDTO]:
        return [ClientDTO.from_client(c) for c in self._manager.list_clients()]
