"""Cart screen: cart table, removal by row and checkout."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.order_workflow import OrderWorkflow
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException, OutOfRangeError
from storefront.infrastructure.bootstrap import StorefrontContext

CART_ACTIONS = click.Choice(["remove", "order", "back"], case_sensitive=False)


def show_cart(ctx: StorefrontContext) -> None:
    view = ShowCartHandler(ctx.cart).handle()

    click.echo(f"== Cart Summary ==  Total: {view.total}")
    if not view.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(
        f"  {'#':>3} {'Product':<20} {'Category':<15} {'Price':>12} {'Qty':>5} {'Total':>12}"
    )
    click.echo(f"  {'-'*72}")
    for line in view.lines:
        click.echo(
            f"  {line.position + 1:>3} {line.product_name:<20} {line.category:<15} "
            f"{line.unit_price:>12} {line.quantity:>5} {line.line_total:>12}"
        )


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.number}  (status={dto.status})")
    click.echo(f"Placed:   {dto.placed_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<27} {dto.total:>24}")


def cart_screen(ctx: StorefrontContext) -> None:
    """Loop over the cart until the customer goes back or orders."""
    while True:
        click.echo()
        show_cart(ctx)
        action = click.prompt("Action", type=CART_ACTIONS, default="back")

        if action == "back":
            return

        if action == "remove":
            row = click.prompt("Remove row #", type=int)
            try:
                ctx.cart.remove_at(row - 1)
            except OutOfRangeError:
                click.echo(
                    f"Error: No row {row} in the cart ({len(ctx.cart)} rows)",
                    err=True,
                )
            continue

        address = click.prompt("Enter delivery address", default="", show_default=False)
        try:
            order = ctx.workflow.place_order(ctx.cart, address)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
            continue

        click.echo("Order placed successfully!")
        click.echo(f"Delivering to: {order.delivery_address}")
        click.echo()
        _display_order(OrderWorkflow.to_dto(order))
        return
