"""Application service: Submit Purchase Request use case."""

from __future__ import annotations

from ims.application.dto import RequestDTO
from ims.domain.exceptions import ValidationError
from ims.domain.model.purchase_request import PurchaseRequest
from ims.domain.service.inventory_manager import InventoryManager


class SubmitRequestHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self, description: str) -> RequestDTO:
        """Queue a new request at the tail, with the next request id."""
        # Checked here too so a rejected description does not use up an id.
        if not description or not description.strip():
            raise ValidationError("Request description is required")
        request = PurchaseRequest.create(self._manager.next_request_id(), description)
        self._manager.enqueue_request(request)
        return RequestDTO.from_request(request)
