import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.inventory_commands import (
    inventory_reserve,
    inventory_set,
    inventory_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_add_color,
    product_add_image,
    product_add_size,
    product_delete,
    product_delete_image,
    product_list,
    product_set_primary_image,
    product_update,
)
from storefront.infrastructure.cli.user_commands import (
    address_add,
    address_delete,
    address_list,
    address_set_default,
    address_update,
    user_add,
)
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: carts, checkout and inventory"""
    configure_logging()


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def address() -> None:
    """Manage a user's addresses."""


@cli.group()
def product() -> None:
    """Manage products, variants and images."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Place and manage orders."""


# Register subcommands
user.add_command(user_add)
address.add_command(address_add)
address.add_command(address_delete)
address.add_command(address_list)
address.add_command(address_set_default)
address.add_command(address_update)
product.add_command(product_add)
product.add_command(product_add_color)
product.add_command(product_add_image)
product.add_command(product_add_size)
product.add_command(product_delete)
product.add_command(product_delete_image)
product.add_command(product_list)
product.add_command(product_set_primary_image)
product.add_command(product_update)
inventory.add_command(inventory_reserve)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
