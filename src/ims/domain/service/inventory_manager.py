"""Domain service: Inventory Manager.

The single orchestrator of a session. It owns the catalog, the change
log and both queues, and it is the only code path that mutates the
catalog. Every mutation is paired with a change log entry so ``undo()``
can always reverse the most recent one.
"""

from __future__ import annotations

import logging

from ims.domain.catalog import Catalog
from ims.domain.change_log import ChangeLog
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.change import ChangeEntry, ChangeKind, UndoOutcome
from ims.domain.model.client import Client
from ims.domain.model.product import Product
from ims.domain.model.purchase_request import PurchaseRequest
from ims.domain.queues import RequestQueue, WaitingQueue

logger = logging.getLogger(__name__)


class InventoryManager:

    def __init__(self, history_limit: int | None = None) -> None:
        self._catalog = Catalog()
        self._change_log = ChangeLog(max_entries=history_limit)
        self._requests = RequestQueue()
        self._clients = WaitingQueue()

    # --- Catalog mutations (always logged) -------------------------------------

    def add_product(self, product: Product) -> Product:
        """Register a product. Duplicate names are accepted."""
        self._catalog.register(product)
        self._change_log.record(ChangeKind.ADD, product)
        return product

    def remove_product(self, name: str) -> Product:
        """Remove the first product named *name* and return its snapshot.

        Nothing is logged when the product does not exist.
        """
        removed = self._catalog.remove(name)
        self._change_log.record(ChangeKind.REMOVE, removed)
        return removed

    def undo(self) -> UndoOutcome:
        """Reverse the most recent catalog mutation.

        Raises NothingToUndoError if the change log is empty. Undoing an
        ADD whose product is already gone is a no-op but still succeeds.
        """
        entry = self._change_log.undo_last()

        if entry.kind == ChangeKind.ADD:
            try:
                self._catalog.remove(entry.product.name)
            except EntityNotFoundError:
                logger.info(
                    "Undo of ADD %r: product no longer in catalog, nothing removed",
                    entry.product.name,
                )
                return UndoOutcome(entry=entry, applied=False)
        else:
            self._catalog.register(entry.product)

        logger.debug("Undid %s of %r", entry.kind.value, entry.product.name)
        return UndoOutcome(entry=entry)

    # --- Catalog queries ------------------------------------------------------

    def find_product(self, name: str) -> Product:
        return self._catalog.find(name)

    def list_products(self) -> list[Product]:
        return self._catalog.list_sorted()

    def history(self) -> list[ChangeEntry]:
        """Undoable changes, oldest first."""
        return self._change_log.entries()

    # --- Purchase requests ----------------------------------------------------

    def next_request_id(self) -> int:
        return self._requests.next_id()

    def enqueue_request(self, request: PurchaseRequest) -> PurchaseRequest:
        self._requests.enqueue(request)
        return request

    def process_request(self) -> PurchaseRequest:
        return self._requests.dequeue()

    def peek_request(self) -> PurchaseRequest:
        return self._requests.peek_head()

    def list_requests(self) -> list[PurchaseRequest]:
        return self._requests.list_all()

    # --- Waiting clients ------------------------------------------------------

    def next_client_id(self) -> int:
        return self._clients.next_id()

    def enqueue_client(self, client: Client) -> Client:
        self._clients.enqueue(client)
        return client

    def attend_client(self) -> Client:
        return self._clients.dequeue()

    def list_clients(self) -> list[Client]:
        return self._clients.list_all()
