"""Application service: List Requests use case (query)."""

from __future__ import annotations

from ims.application.dto import RequestDTO
from ims.domain.service.inventory_manager import InventoryManager


class ListRequestsHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> list[RequestDTO]:
        return [RequestDTO.from_request(r) for r in self._manager.list_requests()]
