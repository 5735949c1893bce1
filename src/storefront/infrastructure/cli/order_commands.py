"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import enforce_status_transitions, unit_of_work


@click.command("place")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.option("--address", "address_id", required=True, type=int, help="Shipping address ID.")
@click.option("--payment", "payment_method", required=True, help="Payment method, e.g. card.")
def order_place(user_id: int, address_id: int, payment_method: str) -> None:
    """Turn the user's cart into an order."""
    handler = PlaceOrderHandler(uow_factory=unit_of_work)

    try:
        result = handler.handle(user_id, address_id, payment_method)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{result.order_id} placed  (total={result.total_amount})")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(
        f"Order #{dto.id}  (status={dto.order_status}, payment={dto.payment_status})"
    )
    click.echo(f"User:     #{dto.user_id}  address #{dto.address_id}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Variant':<12} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*40}")
    for item in dto.items:
        variant = f"{item.product_id}/{item.color_id}/{item.size_id}"
        click.echo(
            f"  {variant:<12} {item.quantity:>5} {item.price_per_unit:>10} {item.sub_total:>10}"
        )
    click.echo(f"  {'-'*40}")
    click.echo(f"  {'Order Total':<20} {dto.total_amount:>19}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--user", "user_id", default=None, type=int, help="Only if owned by this user.")
def order_show(order_id: int, user_id: int | None) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(uow_factory=unit_of_work)

    try:
        dto = handler.handle(order_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, type=int, help="Filter by user ID.")
def order_list(user_id: int | None) -> None:
    """List orders, newest first."""
    orders = ListOrdersHandler(uow_factory=unit_of_work).handle(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    for o in orders:
        click.echo(
            f"#{o.id:<5} user #{o.user_id:<5} {o.total_amount:>12}  "
            f"{o.order_status:<10} {o.payment_status:<9} {o.created_at}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--order-status", default=None, help="processing, shipped, delivered or cancelled.")
@click.option("--payment-status", default=None, help="pending, paid, failed or refunded.")
def order_status(order_id: int, order_status: str | None, payment_status: str | None) -> None:
    """Move an order's fulfilment or payment status."""
    handler = UpdateOrderStatusHandler(
        uow_factory=unit_of_work,
        enforce_transitions=enforce_status_transitions(),
    )

    try:
        changed = handler.handle(order_id, order_status, payment_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if changed:
        click.echo(f"Order #{order_id} updated.")
    else:
        click.echo(f"Order #{order_id} already in the requested state.")
