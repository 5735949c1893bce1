"""CLI commands for a user's shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.remove_from_cart import ClearCartHandler, RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--color", "color_id", required=True, type=int, help="Color ID.")
@click.option("--size", "size_id", required=True, type=int, help="Size ID.")
@click.option("--quantity", default=1, type=int, help="Units wanted.")
def cart_add(user_id: int, product_id: int, color_id: int, size_id: int, quantity: int) -> None:
    """Put a variant in the cart (replaces the quantity if already there)."""
    handler = AddToCartHandler(uow_factory=unit_of_work)

    try:
        line_id = handler.handle(user_id, product_id, color_id, size_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart item #{line_id}: {quantity} x {product_id}/{color_id}/{size_id}")


@click.command("update")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.option("--item", "line_id", required=True, type=int, help="Cart item ID.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
def cart_update(user_id: int, line_id: int, quantity: int) -> None:
    """Change the quantity of a cart item."""
    handler = UpdateCartItemHandler(uow_factory=unit_of_work)

    try:
        handler.handle(user_id, line_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart item #{line_id} set to {quantity}")


@click.command("remove")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.option("--item", "line_id", required=True, type=int, help="Cart item ID.")
def cart_remove(user_id: int, line_id: int) -> None:
    """Remove one item from the cart."""
    handler = RemoveFromCartHandler(uow_factory=unit_of_work)

    try:
        handler.handle(user_id, line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart item #{line_id} removed")


@click.command("clear")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
def cart_clear(user_id: int) -> None:
    """Empty the cart."""
    removed = ClearCartHandler(uow_factory=unit_of_work).handle(user_id)
    click.echo(f"Removed {removed} item(s)")


@click.command("show")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
def cart_show(user_id: int) -> None:
    """Show the cart priced at today's prices."""
    handler = ShowCartHandler(uow_factory=unit_of_work)

    try:
        cart = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not cart.items:
        click.echo("Cart is empty.")
        return

    click.echo(
        f"  {'#':>4} {'Product':<20} {'Variant':<9} {'Qty':>5} {'Price':>10} {'Total':>10} {'Stock':>6}"
    )
    click.echo(f"  {'-'*70}")
    for item in cart.items:
        variant = f"{item.color_id}/{item.size_id}"
        click.echo(
            f"  {item.id:>4} {item.product_name:<20} {variant:<9} {item.quantity:>5} "
            f"{item.final_price:>10} {item.sub_total:>10} {item.in_stock:>6}"
        )
    click.echo(f"  {'-'*70}")
    s = cart.summary
    click.echo(f"  {'Subtotal':<40} {s.sub_total:>20}")
    click.echo(f"  {'Shipping':<40} {s.shipping_cost:>20}")
    click.echo(f"  {'Tax':<40} {s.tax:>20}")
    click.echo(f"  {'Total':<40} {s.total:>20}")
