"""Application service: Show Current Request use case (query)."""

from __future__ import annotations

from ims.application.dto import RequestDTO
from ims.domain.service.inventory_manager import InventoryManager


class ShowCurrentRequestHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> RequestDTO:
        """The request at the head of the queue, left in place."""
        return RequestDTO.from_request(self._manager.peek_request())
