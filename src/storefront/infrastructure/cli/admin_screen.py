"""Admin screen: product form and product table."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import StorefrontContext


def show_product_table(ctx: StorefrontContext) -> None:
    products = ctx.registry.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'Category':<15} {'Price':>12} {'Visible':>8}  Image")
    click.echo("-" * 70)
    for p in products:
        click.echo(
            f"{p.name:<20} {p.category:<15} {str(p.price):>12} "
            f"{'yes' if p.visible else 'no':>8}  {p.image_reference}"
        )


def admin_screen(ctx: StorefrontContext) -> None:
    """Collect one product from the form, then redraw the table."""
    click.echo("== Admin - Add Product ==")
    name = click.prompt("Name", default="", show_default=False)
    category = click.prompt("Category", default="", show_default=False)
    price = click.prompt("Price", default="", show_default=False)
    image = click.prompt("Image path / URL", default="", show_default=False)
    visible = click.confirm("Visible", default=False)

    try:
        product = ctx.registry.create(
            name=name,
            category=category,
            price=price,
            image_reference=image,
            visible=visible,
        )
    except DomainException as exc:
        click.echo(f"Error: {exc}", err=True)
        return

    click.echo(f"Product '{product.name}' added at {product.price}")
    click.echo()
    show_product_table(ctx)
