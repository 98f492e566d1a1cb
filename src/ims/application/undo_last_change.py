"""Application service: Undo Last Change use case.

Only catalog mutations (add / remove product) are undoable. Queue
operations are not recorded in the change log.
"""

from __future__ import annotations

from ims.application.dto import UndoDTO
from ims.domain.service.inventory_manager import InventoryManager


class UndoLastChangeHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self) -> UndoDTO:
        return UndoDTO.from_outcome(self._manager.undo())
