"""CLI commands for the catalog: products, variants and images."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.add_product_image import AddProductImageHandler
from storefront.application.add_product_variant import (
    AddProductColorHandler,
    AddProductSizeHandler,
)
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.delete_product_image import DeleteProductImageHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.set_primary_image import SetPrimaryImageHandler
from storefront.application.update_product import UpdateProductPriceHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Base price (e.g. 25.00).")
@click.option("--discount", default="0", help="Discount percentage, 0 to 100.")
@click.option("--description", default="", help="Free text description.")
def product_add(name: str, price: str, discount: str, description: str) -> None:
    """Add a product to the catalog."""
    handler = AddProductHandler(uow_factory=unit_of_work)

    try:
        product_id = handler.handle(
            name=name, price=price, description=description, discount_percentage=discount
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} '{name}' created")


@click.command("list")
def product_list() -> None:
    """List all products with their current prices."""
    products = ListProductsHandler(uow_factory=unit_of_work).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':>4}  {'Name':<20} {'Base':>10} {'Discount':>9} {'Final':>10}")
    click.echo("-" * 57)
    for p in products:
        click.echo(
            f"{p.id:>4}  {p.name:<20} {p.base_price:>10} {p.discount_percentage:>9} {p.final_price:>10}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New base price.")
@click.option("--discount", default=None, help="New discount percentage.")
def product_update(product_id: int, price: str, discount: str | None) -> None:
    """Change a product's price (open carts see it, placed orders do not)."""
    handler = UpdateProductPriceHandler(uow_factory=unit_of_work)

    try:
        handler.handle(product_id, price, discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} repriced to ${price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product and everything that hangs off it."""
    handler = DeleteProductHandler(uow_factory=unit_of_work)

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")


@click.command("add-color")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Color name.")
@click.option("--hex", "color_hex", required=True, help="Hex code, e.g. #ff0000.")
def product_add_color(product_id: int, name: str, color_hex: str) -> None:
    """Add a color variant axis value."""
    handler = AddProductColorHandler(uow_factory=unit_of_work)

    try:
        color_id = handler.handle(product_id, name, color_hex)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Color #{color_id} added to product #{product_id}")


@click.command("add-size")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Size name, e.g. M.")
def product_add_size(product_id: int, name: str) -> None:
    """Add a size variant axis value."""
    handler = AddProductSizeHandler(uow_factory=unit_of_work)

    try:
        size_id = handler.handle(product_id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Size #{size_id} added to product #{product_id}")


@click.command("add-image")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--url", required=True, help="Image URL.")
@click.option("--primary", is_flag=True, default=False, help="Make this the primary image.")
def product_add_image(product_id: int, url: str, primary: bool) -> None:
    """Attach an image to a product."""
    handler = AddProductImageHandler(uow_factory=unit_of_work)

    try:
        result = handler.handle(product_id, url, is_primary=primary)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    suffix = " (primary)" if result.is_default else ""
    click.echo(f"Image #{result.id} added{suffix}")


@click.command("set-primary-image")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--image", "image_id", required=True, type=int, help="Image ID.")
def product_set_primary_image(product_id: int, image_id: int) -> None:
    """Make an image the product's primary image."""
    handler = SetPrimaryImageHandler(uow_factory=unit_of_work)

    try:
        handler.handle(product_id, image_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Image #{image_id} is now primary")


@click.command("delete-image")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--image", "image_id", required=True, type=int, help="Image ID.")
def product_delete_image(product_id: int, image_id: int) -> None:
    """Delete a product image."""
    handler = DeleteProductImageHandler(uow_factory=unit_of_work)

    try:
        result = handler.handle(product_id, image_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Image #{image_id} deleted")
    if result.promoted_id is not None:
        click.echo(f"Image #{result.promoted_id} is now primary")
