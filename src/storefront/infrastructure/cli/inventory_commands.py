"""CLI commands for inventory management."""

from __future__ import annotations

import click

from storefront.application.reserve_inventory import ReserveInventoryHandler
from storefront.application.set_inventory import SetInventoryHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work


def _variant_options(func):
    func = click.option("--size", "size_id", required=True, type=int, help="Size ID.")(func)
    func = click.option("--color", "color_id", required=True, type=int, help="Color ID.")(func)
    func = click.option("--product", "product_id", required=True, type=int, help="Product ID.")(func)
    return func


@click.command("set")
@_variant_options
@click.option("--quantity", required=True, type=int, help="Units in stock.")
def inventory_set(product_id: int, color_id: int, size_id: int, quantity: int) -> None:
    """Set the stock level of one variant."""
    handler = SetInventoryHandler(uow_factory=unit_of_work)

    try:
        handler.handle(product_id, color_id, size_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory for {product_id}/{color_id}/{size_id} set to {quantity}")


@click.command("reserve")
@_variant_options
@click.option("--quantity", required=True, type=int, help="Units to take.")
def inventory_reserve(product_id: int, color_id: int, size_id: int, quantity: int) -> None:
    """Take units out of stock."""
    handler = ReserveInventoryHandler(uow_factory=unit_of_work)

    try:
        remaining = handler.handle(product_id, color_id, size_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Reserved {quantity}; {remaining} left")


@click.command("show")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
def inventory_show(product_id: int) -> None:
    """Show stock levels for every variant of a product."""
    handler = ShowInventoryHandler(uow_factory=unit_of_work)

    try:
        lines = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Color':>6} {'Size':>6} {'Available':>10}")
    click.echo("-" * 24)
    for line in lines:
        click.echo(f"{line.color_id:>6} {line.size_id:>6} {line.quantity:>10}")
