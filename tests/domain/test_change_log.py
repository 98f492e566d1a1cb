"""Unit tests for the ChangeLog."""

import pytest

from ims.domain.change_log import ChangeLog
from ims.domain.exceptions import NothingToUndoError, ValidationError
from ims.domain.model.change import ChangeEntry, ChangeKind, UndoOutcome
from ims.domain.model.product import Product

PEN = Product("Pen", 1.5, 100)
INK = Product("Ink", 3.0, 20)


class TestChangeLogRecord:

    def test_record_returns_entry(self):
        log = ChangeLog()
        entry = log.record(ChangeKind.ADD, PEN)
        assert entry == ChangeEntry(ChangeKind.ADD, PEN)
        assert len(log) == 1

    def test_entries_in_chronological_order(self):
        log = ChangeLog()
        log.record(ChangeKind.ADD, PEN)
        log.record(ChangeKind.REMOVE, PEN)
        assert [e.kind for e in log.entries()] == [ChangeKind.ADD, ChangeKind.REMOVE]

    def test_unbounded_by_default(self):
        log = ChangeLog()
        for _ in range(1000):
            log.record(ChangeKind.ADD, PEN)
        assert len(log) == 1000


class TestChangeLogUndoLast:

    def test_empty_log(self):
        log = ChangeLog()
        assert log.is_empty
        with pytest.raises(NothingToUndoError, match="No changes to undo"):
            log.undo_last()

    def test_last_in_first_out(self):
        log = ChangeLog()
        log.record(ChangeKind.ADD, PEN)
        log.record(ChangeKind.ADD, INK)
        assert log.undo_last().product == INK
        assert log.undo_last().product == PEN
        assert log.is_empty

    def test_popped_entry_is_gone(self):
        log = ChangeLog()
        log.record(ChangeKind.ADD, PEN)
        log.undo_last()
        with pytest.raises(NothingToUndoError):
            log.undo_last()


class TestChangeLogLimit:

    def test_oldest_entry_dropped(self):
        log = ChangeLog(max_entries=2)
        log.record(ChangeKind.ADD, PEN)
        log.record(ChangeKind.ADD, INK)
        log.record(ChangeKind.REMOVE, INK)
        assert [(e.kind, e.product.name) for e in log.entries()] == [
            (ChangeKind.ADD, "Ink"),
            (ChangeKind.REMOVE, "Ink"),
        ]

    def test_zero_limit_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            ChangeLog(max_entries=0)


class TestUndoOutcome:

    def test_description_for_add(self):
        outcome = UndoOutcome(ChangeEntry(ChangeKind.ADD, PEN))
        assert outcome.description == "Undo: added product removed: Pen"

    def test_description_for_remove(self):
        outcome = UndoOutcome(ChangeEntry(ChangeKind.REMOVE, PEN))
        assert outcome.description == "Undo: removed product restored: Pen"
