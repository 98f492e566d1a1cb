"""Application service: Process Request use case.

Takes the oldest pending request off the queue. Processed requests are
not kept anywhere afterwards.
"""

from __future__ import annotations

from ims.application.dto import RequestDTO
from ims.domain.service.inventory_manager import InventoryManager


class ProcessRequestHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> RequestDTO:
        return RequestDTO.from_request(self._manager.process_request())
