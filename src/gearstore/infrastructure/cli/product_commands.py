"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from gearstore.application.add_product import AddProductHandler
from gearstore.application.delete_product import DeleteProductHandler
from gearstore.application.dto import ProductDTO
from gearstore.application.field_values import AUTOCOMPLETE_FIELDS, FieldValuesHandler
from gearstore.application.list_products import ListProductsHandler
from gearstore.application.mark_sold import MarkSoldHandler
from gearstore.application.show_product import ShowProductHandler
from gearstore.application.update_product import UpdateProductHandler
from gearstore.domain.exceptions import DomainException
from gearstore.infrastructure.bootstrap import Container

pass_container = click.make_pass_decorator(Container)


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  '{dto.name}'  {dto.price}  [{dto.status}]")
    click.echo(f"Category: {dto.category}   Quality: {dto.quality}   Inventory: {dto.inventory}")
    extras = [
        f"{label}: {value}"
        for label, value in (
            ("Brand", dto.brand),
            ("Size", dto.size),
            ("Weight", dto.weight),
            ("Color", dto.color),
        )
        if value
    ]
    if extras:
        click.echo("   ".join(extras))
    if dto.description:
        click.echo(dto.description)
    for url in dto.images:
        click.echo(f"  image: {url}")
    if dto.held_by:
        click.echo(f"Held by: {dto.held_by}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 75.00).")
@click.option("--inventory", default="1", show_default=True, help="Units in stock.")
@click.option("--category", required=True, help="e.g. Gloves, Shin Guards.")
@click.option("--quality", required=True, help="e.g. New, Used - Good.")
@click.option("--brand", default=None)
@click.option("--size", default=None)
@click.option("--weight", default=None)
@click.option("--color", default=None)
@click.option("--image", "image_urls", multiple=True, help="Image URL (repeatable, max 4).")
@pass_container
def product_add(
    container: Container,
    name: str,
    description: str,
    price: str,
    inventory: str,
    category: str,
    quality: str,
    brand: str | None,
    size: str | None,
    weight: str | None,
    color: str | None,
    image_urls: tuple[str, ...],
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=container.products, clock=container.clock)

    try:
        product = handler.handle(
            name=name,
            description=description,
            price=price,
            inventory=inventory,
            category=category,
            quality=quality,
            image_urls=list(image_urls),
            brand=brand,
            size=size,
            weight=weight,
            color=color,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option(
    "--status",
    default=None,
    type=click.Choice(["Active", "On Hold", "Sold"]),
    help="Only products with this effective status.",
)
@pass_container
def product_list(container: Container, status: str | None) -> None:
    """List all products with their effective status."""
    handler = ListProductsHandler(container.products, container.holds, container.clock)

    try:
        products = handler.handle(status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<20} {'Name':<30} {'Price':>10} {'Inv':>4}  {'Status':<8}")
    click.echo("-" * 78)
    for p in products:
        click.echo(f"{p.id:<20} {p.name:<30} {p.price:>10} {p.inventory:>4}  {p.status:<8}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_container
def product_show(container: Container, product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(container.products, container.holds, container.clock)

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--inventory", default=None)
@click.option("--category", default=None)
@click.option("--quality", default=None)
@click.option("--brand", default=None, help="Pass an empty string to clear.")
@click.option("--size", default=None)
@click.option("--weight", default=None)
@click.option("--color", default=None)
@click.option("--image", "image_urls", multiple=True, help="Replace images (repeatable, max 4).")
@pass_container
def product_update(container: Container, product_id: str, image_urls: tuple[str, ...], **fields: str | None) -> None:
    """Update only the given product fields."""
    changes = {key: value for key, value in fields.items() if value is not None}
    if image_urls:
        changes["image_urls"] = list(image_urls)

    handler = UpdateProductHandler(container.products, container.holds, container.clock)

    try:
        dto = handler.handle(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated ({', '.join(sorted(changes))})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product permanently?")
@pass_container
def product_delete(container: Container, product_id: str) -> None:
    """Delete a product record."""
    handler = DeleteProductHandler(container.products)

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("mark-sold")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_container
def product_mark_sold(container: Container, product_id: str) -> None:
    """Mark a product sold outside the hold flow (inventory -> 0)."""
    handler = MarkSoldHandler(container.products, container.clock)

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' marked as sold")


@click.command("field-values")
@click.option("--field", required=True, type=click.Choice(AUTOCOMPLETE_FIELDS))
@pass_container
def product_field_values(container: Container, field: str) -> None:
    """Distinct values already used for a product field."""
    handler = FieldValuesHandler(container.products)

    try:
        values = handler.handle(field)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for value in values:
        click.echo(value)
