"""Application service: Register Waiting Client use case."""

from __future__ import annotations

from ims.application.dto import ClientDTO
from ims.domain.exceptions import ValidationError
from ims.domain.model.client import Client
from ims.domain.service.inventory_manager import InventoryManager


class RegisterClientHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self, name: str) -> ClientDTO:
        """Put a client at the end of the waiting line."""
        # Checked here too so a rejected name does not use up an id.
        if not name or not name.strip():
            raise ValidationError("Client name is required")
        client = Client.create(self._manager.next_client_id(), name)
        self._manager.enqueue_client(client)
        return ClientDTO.from_client(client)
