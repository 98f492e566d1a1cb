"""Commands available inside an interactive session.

Each command receives the session's InventoryManager as the click
context object.
"""

import click

from ims.infrastructure.cli.client_commands import client_add, client_attend, client_list
from ims.infrastructure.cli.history_commands import history, undo
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_show,
)
from ims.infrastructure.cli.request_commands import (
    request_current,
    request_list,
    request_process,
    request_submit,
)


@click.group()
def session() -> None:
    """Session commands (type 'exit' to leave)."""


@session.group()
def product() -> None:
    """Manage the product catalog."""


@session.group()
def request() -> None:
    """Manage purchase requests."""


@session.group()
def client() -> None:
    """Manage the waiting line."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
request.add_command(request_current)
request.add_command(request_list)
request.add_command(request_process)
request.add_command(request_submit)
client.add_command(client_add)
client.add_command(client_attend)
client.add_command(client_list)
session.add_command(history)
session.add_command(undo)
