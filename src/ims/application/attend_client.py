"""Application service: Attend Client use case."""

from __future__ import annotations

from ims.application.dto import ClientDTO
from ims.domain.service.inventory_manager import InventoryManager


class AttendClientHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> ClientDTO:
        """Take the client who has waited longest off the line."""
        return ClientDTO.from_client(self._manager.attend_client())
