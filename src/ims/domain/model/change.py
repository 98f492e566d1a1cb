"""Change log entries and the outcome of reversing one."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ims.domain.model.product import Product


class ChangeKind(Enum):
    ADD = "ADD"
    REMOVE = "REMOVE"


@dataclass(frozen=True)
class ChangeEntry:
    """A single catalog mutation.

    ``product`` is the snapshot taken at mutation time: for ADD it is the
    product that was registered, for REMOVE the product that was taken out.
    """

    kind: ChangeKind
    product: Product


@dataclass(frozen=True)
class UndoOutcome:
    """Result of reversing the most recent ChangeEntry.

    ``applied`` is False only when an ADD was undone but no product with
    that name was left in the catalog. The undo still counts as done.
    """

    entry: ChangeEntry
    applied: bool = True

    @property
    def description(self) -> str:
        if self.entry.kind == ChangeKind.ADD:
            return f"Undo: added product removed: {self.entry.product.name}"
        return f"Undo: removed product restored: {self.entry.product.name}"
