"""Application service: Show Change History use case (query)."""

from __future__ import annotations

from ims.application.dto import ChangeDTO
from ims.domain.service.inventory_manager import InventoryManager


class ShowHistoryHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> list[ChangeDTO]:
        """Undoable changes, oldest first (the last one is undone next)."""
        return [ChangeDTO.from_entry(e) for e in self._manager.history()]
