"""CLI commands for users and their address book."""

from __future__ import annotations

import click

from storefront.application.add_user import AddUserHandler
from storefront.application.create_address import CreateAddressHandler
from storefront.application.delete_address import DeleteAddressHandler
from storefront.application.list_addresses import ListAddressesHandler
from storefront.application.set_default_address import SetDefaultAddressHandler
from storefront.application.update_address import UpdateAddressHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.customer import AddressFields
from storefront.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="E-mail address (unique).")
def user_add(name: str, email: str) -> None:
    """Register a user."""
    handler = AddUserHandler(uow_factory=unit_of_work)

    try:
        user_id = handler.handle(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} created")


def _address_options(func):
    for option in reversed(
        [
            click.option("--name", required=True, help="Recipient name."),
            click.option("--street", required=True),
            click.option("--city", required=True),
            click.option("--state", required=True),
            click.option("--postal-code", required=True),
            click.option("--country", required=True),
            click.option("--phone", required=True),
            click.option("--default/--no-default", "is_default", default=False,
                         help="Make this the default address."),
        ]
    ):
        func = option(func)
    return func


@click.command("add")
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID.")
@_address_options
def address_add(user_id: int, is_default: bool, **fields: str) -> None:
    """Add an address to a user's address book."""
    handler = CreateAddressHandler(uow_factory=unit_of_work)

    try:
        result = handler.handle(user_id, AddressFields(**fields), is_default=is_default)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    suffix = " (default)" if result.is_default else ""
    click.echo(f"Address #{result.id} created{suffix}")


@click.command("update")
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID.")
@click.option("--id", "address_id", required=True, type=int, help="Address ID.")
@_address_options
def address_update(user_id: int, address_id: int, is_default: bool, **fields: str) -> None:
    """Replace an address's fields and default flag."""
    handler = UpdateAddressHandler(uow_factory=unit_of_work)

    try:
        result = handler.handle(user_id, address_id, AddressFields(**fields), is_default)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    suffix = " (default)" if result.is_default else ""
    click.echo(f"Address #{result.id} updated{suffix}")


@click.command("set-default")
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID.")
@click.option("--id", "address_id", required=True, type=int, help="Address ID.")
def address_set_default(user_id: int, address_id: int) -> None:
    """Make an address the user's default."""
    handler = SetDefaultAddressHandler(uow_factory=unit_of_work)

    try:
        handler.handle(user_id, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address #{address_id} is now the default")


@click.command("delete")
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID.")
@click.option("--id", "address_id", required=True, type=int, help="Address ID.")
def address_delete(user_id: int, address_id: int) -> None:
    """Delete an address (the newest remaining one inherits the default)."""
    handler = DeleteAddressHandler(uow_factory=unit_of_work)

    try:
        result = handler.handle(user_id, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address #{address_id} deleted")
    if result.promoted_id is not None:
        click.echo(f"Address #{result.promoted_id} is now the default")


@click.command("list")
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID.")
def address_list(user_id: int) -> None:
    """List a user's addresses, default first."""
    addresses = ListAddressesHandler(uow_factory=unit_of_work).handle(user_id)

    if not addresses:
        click.echo("No addresses found.")
        return

    for a in addresses:
        marker = "*" if a.is_default else " "
        click.echo(
            f"{marker} #{a.id:<4} {a.name}, {a.street}, {a.city}, {a.state} "
            f"{a.postal_code}, {a.country}  ({a.phone})"
        )
