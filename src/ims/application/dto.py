"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.change import ChangeEntry, UndoOutcome
from ims.domain.model.client import Client
from ims.domain.model.product import Product
from ims.domain.model.purchase_request import PurchaseRequest


@dataclass(frozen=True)
class ProductDTO:
    name: str
    price: float
    quantity: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            name=product.name, price=product.price, quantity=product.quantity
        )


@dataclass(frozen=True)
class RequestDTO:
    id: int
    description: str

    @staticmethod
    def from_request(request: PurchaseRequest) -> RequestDTO:
        return RequestDTO(id=request.id, description=request.description)


@dataclass(frozen=True)
class ClientDTO:
    id: int
    name: str

    @staticmethod
    def from_client(client: Client) -> ClientDTO:
        return ClientDTO(id=client.id, name=client.name)


@dataclass(frozen=True)
class ChangeDTO:
    """Output: one undoable change, as shown by the history view."""

    kind: str  # "ADD" or "REMOVE"
    product: ProductDTO

    @staticmethod
    def from_entry(entry: ChangeEntry) -> ChangeDTO:
        return ChangeDTO(
            kind=entry.kind.value, product=ProductDTO.from_product(entry.product)
        )


@dataclass(frozen=True)
class UndoDTO:
    """Output: what an undo reversed."""

    kind: str
    product: ProductDTO
    applied: bool
    description: str

    @staticmethod
    def from_outcome(outcome: UndoOutcome) -> UndoDTO:
        return UndoDTO(
            kind=outcome.entry.kind.value,
            product=ProductDTO.from_product(outcome.entry.product),
            applied=outcome.applied,
            description=outcome.description,
        )
