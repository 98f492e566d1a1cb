"""Session commands for the product catalog."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.dto import ProductDTO
from ims.application.list_products import ListProductsHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_product import ShowProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.service.inventory_manager import InventoryManager


def format_product(product: ProductDTO) -> str:
    return (
        f"Product: {product.name}, Price: {product.price:g}, "
        f"Quantity: {product.quantity}"
    )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option(
    "--price", required=True, type=click.FloatRange(min=0), help="Unit price (e.g. 1.50)."
)
@click.option(
    "--quantity", required=True, type=click.IntRange(min=0), help="Units in stock."
)
@click.pass_obj
def product_add(manager: InventoryManager, name: str, price: float, quantity: int) -> None:
    """Register a product in the catalog."""
    handler = AddProductHandler(manager)

    try:
        product = handler.handle(name=name, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product added: {product.name}")


@click.command("remove")
@click.option("--name", required=True, help="Exact product name.")
@click.pass_obj
def product_remove(manager: InventoryManager, name: str) -> None:
    """Remove a product from the catalog (undoable)."""
    handler = RemoveProductHandler(manager)

    try:
        product = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product removed: {product.name}")


@click.command("show")
@click.option("--name", required=True, help="Exact product name.")
@click.pass_obj
def product_show(manager: InventoryManager, name: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(manager)

    try:
        product = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(format_product(product))


@click.command("list")
@click.pass_obj
def product_list(manager: InventoryManager) -> None:
    """List all products, sorted by name."""
    products = ListProductsHandler(manager).handle()

    if not products:
        click.echo("No products registered.")
        return

    for product in products:
        click.echo(format_product(product))
