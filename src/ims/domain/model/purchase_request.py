"""PurchaseRequest value: a pending request waiting to be processed."""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import ValidationError


@dataclass(frozen=True)
class PurchaseRequest:

    id: int
    description: str

    @staticmethod
    def create(request_id: int, description: str) -> PurchaseRequest:
        if not description or not description.strip():
            raise ValidationError("Request description is required")
        return PurchaseRequest(id=request_id, description=description.strip())
