"""Session commands for the purchase request queue."""

from __future__ import annotations

import click

from ims.application.list_requests import ListRequestsHandler
from ims.application.process_request import ProcessRequestHandler
from ims.application.show_current_request import ShowCurrentRequestHandler
from ims.application.submit_request import SubmitRequestHandler
from ims.domain.exceptions import DomainException
from ims.domain.service.inventory_manager import InventoryManager


@click.command("submit")
@click.option("--description", required=True, help="What is being requested.")
@click.pass_obj
def request_submit(manager: InventoryManager, description: str) -> None:
    """Queue a new purchase request."""
    handler = SubmitRequestHandler(manager)

    try:
        request = handler.handle(description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Request #{request.id} registered: {request.description}")


@click.command("process")
@click.pass_obj
def request_process(manager: InventoryManager) -> None:
    """Process (and drop) the oldest pending request."""
    handler = ProcessRequestHandler(manager)

    try:
        request = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Processing request #{request.id}: {request.description}")


@click.command("current")
@click.pass_obj
def request_current(manager: InventoryManager) -> None:
    """Show the request that will be processed next."""
    handler = ShowCurrentRequestHandler(manager)

    try:
        request = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Request in process: #{request.id} {request.description}")


@click.command("list")
@click.pass_obj
def request_list(manager: InventoryManager) -> None:
    """List pending requests in arrival order."""
    requests = ListRequestsHandler(manager).handle()

    if not requests:
        click.echo("No pending requests.")
        return

    for request in requests:
        click.echo(f"Pending request #{request.id}: {request.description}")
