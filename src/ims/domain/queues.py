"""First-in-first-out queues for purchase requests and waiting clients.

Both queues keep strict arrival order; there is no priority or
reordering. Each one also hands out ids for new items, starting at 1
and never reused within a session.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Generic, TypeVar

from ims.domain.exceptions import QueueEmptyError
from ims.domain.model.client import Client
from ims.domain.model.purchase_request import PurchaseRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FifoQueue(Generic[T]):

    #: Message used when dequeuing or peeking an empty queue.
    empty_message = "Queue is empty"

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._last_id = 0

    def next_id(self) -> int:
        """Reserve and return the next item id."""
        self._last_id += 1
        return self._last_id

    def enqueue(self, item: T) -> None:
        self._items.append(item)
        logger.debug("%s: enqueued %r", type(self).__name__, item)

    def dequeue(self) -> T:
        if not self._items:
            raise QueueEmptyError(self.empty_message)
        item = self._items.popleft()
        logger.debug("%s: dequeued %r", type(self).__name__, item)
        return item

    def peek_head(self) -> T:
        if not self._items:
            raise QueueEmptyError(self.empty_message)
        return self._items[0]

    def list_all(self) -> list[T]:
        """Return pending items in arrival order without removing them."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class RequestQueue(FifoQueue[PurchaseRequest]):

    empty_message = "No pending requests"


class WaitingQueue(FifoQueue[Client]):

    empty_message = "No clients waiting"
