"""Integration tests for undo and the change history view."""

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.dto import ChangeDTO, ProductDTO
from ims.application.list_products import ListProductsHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_history import ShowHistoryHandler
from ims.application.show_product import ShowProductHandler
from ims.application.undo_last_change import UndoLastChangeHandler
from ims.domain.exceptions import EntityNotFoundError, NothingToUndoError
from ims.domain.service.inventory_manager import InventoryManager


class TestUndoLastChange:

    def test_nothing_to_undo(self):
        manager = InventoryManager()
        with pytest.raises(NothingToUndoError, match="No changes to undo"):
            UndoLastChangeHandler(manager).handle()

    def test_undo_add(self):
        manager = InventoryManager()
        AddProductHandler(manager).handle("Pen", 1.5, 100)

        result = UndoLastChangeHandler(manager).handle()

        assert result.kind == "ADD"
        assert result.applied
        assert result.description == "Undo: added product removed: Pen"
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(manager).handle("Pen")

    def test_undo_remove(self):
        manager = InventoryManager()
        AddProductHandler(manager).handle("Pen", 1.5, 100)
        RemoveProductHandler(manager).handle("Pen")

        result = UndoLastChangeHandler(manager).handle()

        assert result.kind == "REMOVE"
        assert result.product == ProductDTO("Pen", 1.5, 100)
        assert result.description == "Undo: removed product restored: Pen"
        assert ListProductsHandler(manager).handle() == [ProductDTO("Pen", 1.5, 100)]

    def test_failed_remove_is_not_undone(self):
        manager = InventoryManager()
        AddProductHandler(manager).handle("Pen", 1.5, 100)
        with pytest.raises(EntityNotFoundError):
            RemoveProductHandler(manager).handle("Ink")

        # the only logged change is the ADD
        result = UndoLastChangeHandler(manager).handle()
        assert result.kind == "ADD"


class TestShowHistory:

    def test_empty(self):
        assert ShowHistoryHandler(InventoryManager()).handle() == []

    def test_oldest_first(self):
        manager = InventoryManager()
        AddProductHandler(manager).handle("Pen", 1.5, 100)
        RemoveProductHandler(manager).handle("Pen")

        assert ShowHistoryHandler(manager).handle() == [
            ChangeDTO("ADD", ProductDTO("Pen", 1.5, 100)),
            ChangeDTO("REMOVE", ProductDTO("Pen", 1.5, 100)),
        ]

    def test_history_limit_drops_oldest(self):
        manager = InventoryManager(history_limit=1)
        AddProductHandler(manager).handle("Pen", 1.5, 100)
        AddProductHandler(manager).handle("Ink", 3.0, 20)

        history = ShowHistoryHandler(manager).handle()
        assert [c.product.name for c in history] == ["Ink"]

        UndoLastChangeHandler(manager).handle()
        with pytest.raises(NothingToUndoError):
            UndoLastChangeHandler(manager).handle()
        # Pen's ADD fell out of the history, so Pen stays
        assert [p.name for p in ListProductsHandler(manager).handle()] == ["Pen"]
