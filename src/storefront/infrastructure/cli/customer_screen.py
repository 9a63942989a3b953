"""Customer screen: visible products grouped by category."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import StorefrontContext

QUANTITY_CHOICES = click.IntRange(1, 5)


def render_catalog(ctx: StorefrontContext) -> list[Product]:
    """Print the grouped catalog and return the products in card order.

    Card numbers printed on screen are 1-based indexes into the list.
    """
    products = ctx.registry.list_visible()
    grouped = ctx.catalog.rebuild(products)
    sections = ctx.catalog.to_sections(grouped)

    if not sections:
        click.echo("No products available.")
        return []

    click.echo("== Available Products by Category ==")
    number = 0
    for section in sections:
        click.echo()
        click.echo(f"[{section.category}]")
        for card in section.cards:
            number += 1
            image = card.image_reference or "[Image Not Found]"
            click.echo(f"  {number:>3}. {card.name:<20} {card.price:>12}  {image}")

    return [p for members in grouped.values() for p in members]


def customer_screen(ctx: StorefrontContext) -> None:
    """Browse and add to cart until the customer goes back."""
    while True:
        cards = render_catalog(ctx)
        if not cards:
            return

        choice = click.prompt(
            "Add product # to cart (0 to go back)",
            type=click.IntRange(0, len(cards)),
            default=0,
        )
        if choice == 0:
            return

        product = cards[choice - 1]
        qty = click.prompt("Quantity", type=QUANTITY_CHOICES, default=1)
        try:
            ctx.cart.add(product, qty)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
            continue

        click.echo(f"{qty} x {product.name} added to cart!")
