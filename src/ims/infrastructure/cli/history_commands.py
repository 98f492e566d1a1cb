"""Session commands for the change history and undo."""

from __future__ import annotations

import click

from ims.application.show_history import ShowHistoryHandler
from ims.application.undo_last_change import UndoLastChangeHandler
from ims.domain.exceptions import DomainException
from ims.domain.service.inventory_manager import InventoryManager


@click.command("undo")
@click.pass_obj
def undo(manager: InventoryManager) -> None:
    """Undo the last product add or remove."""
    handler = UndoLastChangeHandler(manager)

    try:
        result = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.description)


@click.command("history")
@click.pass_obj
def history(manager: InventoryManager) -> None:
    """Show undoable changes, most recent last."""
    changes = ShowHistoryHandler(manager).handle()

    if not changes:
        click.echo("No changes recorded.")
        return

    click.echo(f"{'#':>3}  {'Change':<7} {'Product':<20} {'Price':>10} {'Qty':>6}")
    click.echo("-" * 50)
    for index, change in enumerate(changes, start=1):
        click.echo(
            f"{index:>3}  {change.kind:<7} {change.product.name:<20} "
            f"{change.product.price:>10g} {change.product.quantity:>6}"
        )
