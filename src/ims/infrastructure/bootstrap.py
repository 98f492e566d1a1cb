"""Composition root — builds the objects a session runs on.

This is the only place in the codebase that knows about *all* layers.
A session gets exactly one InventoryManager; nothing is kept in
module-level globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.service.inventory_manager import InventoryManager


@dataclass(frozen=True)
class Settings:
    """Session configuration, filled from CLI options / environment."""

    history_limit: int | None = None  # None keeps every change undoable
    log_level: str = "WARNING"


def build_manager(settings: Settings) -> InventoryManager:
    return InventoryManager(history_limit=settings.history_limit)
