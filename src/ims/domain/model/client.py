"""Client value: somebody waiting in line to be attended."""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Client:

    id: int
    name: str

    @staticmethod
    def create(client_id: int, name: str) -> Client:
        if not name or not name.strip():
            raise ValidationError("Client name is required")
        return Client(id=client_id, name=name.strip())
