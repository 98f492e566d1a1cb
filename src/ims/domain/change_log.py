"""ChangeLog — stack of catalog mutations used for single-step undo.

Entries are appended in chronological order and popped newest-first.
There is no redo: a popped entry is gone for good.
"""

from __future__ import annotations

import logging
from collections import deque

from ims.domain.exceptions import NothingToUndoError, ValidationError
from ims.domain.model.change import ChangeEntry, ChangeKind
from ims.domain.model.product import Product

logger = logging.getLogger(__name__)


class ChangeLog:
    """Append-only history of catalog mutations.

    Unbounded by default. With ``max_entries`` set, the oldest entry is
    dropped when a new one would exceed the limit; those changes can no
    longer be undone.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValidationError("History limit must be at least 1")
        self._max_entries = max_entries
        self._entries: deque[ChangeEntry] = deque()

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def record(self, kind: ChangeKind, product: Product) -> ChangeEntry:
        entry = ChangeEntry(kind=kind, product=product)
        self._entries.append(entry)
        if self._max_entries is not None and len(self._entries) > self._max_entries:
            evicted = self._entries.popleft()
            logger.debug(
                "History limit %d reached, dropped %s of %r",
                self._max_entries, evicted.kind.value, evicted.product.name,
            )
        return entry

    def undo_last(self) -> ChangeEntry:
        """Pop the most recent entry.

        The entry's kind tells the caller how to reverse it:
        ADD -> remove the product by name, REMOVE -> re-insert the snapshot.
        """
        if not self._entries:
            raise NothingToUndoError("No changes to undo")
        return self._entries.pop()

    def entries(self) -> list[ChangeEntry]:
        """Return all entries, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
