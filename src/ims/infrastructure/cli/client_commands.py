"""Session commands for the waiting line."""

from __future__ import annotations

import click

from ims.application.attend_client import AttendClientHandler
from ims.application.list_clients import ListClientsHandler
from ims.application.register_client import RegisterClientHandler
from ims.domain.exceptions import DomainException
from ims.domain.service.inventory_manager import InventoryManager


@click.command("add")
@click.option("--name", required=True, help="Client name.")
@click.pass_obj
def client_add(manager: InventoryManager, name: str) -> None:
    """Put a client at the end of the waiting line."""
    handler = RegisterClientHandler(manager)

    try:
        client = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client #{client.id} registered: {client.name}")


@click.command("attend")
@click.pass_obj
def client_attend(manager: InventoryManager) -> None:
    """Attend the client who has waited longest."""
    handler = AttendClientHandler(manager)

    try:
        client = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Attending client #{client.id}: {client.name}")


@click.command("list")
@click.pass_obj
def client_list(manager: InventoryManager) -> None:
    """List waiting clients in arrival order."""
    clients = ListClientsHandler(manager).handle()

    if not clients:
        click.echo("No clients waiting.")
        return

    for client in clients:
        click.echo(f"Waiting client #{client.id}: {client.name}")
