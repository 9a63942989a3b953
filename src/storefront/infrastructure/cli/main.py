"""Command-line entry point.

Every command builds its own context from the composition root, so one
``shop`` session owns one registry, one cart and one checkout workflow.
"""

from __future__ import annotations

import logging

import click

from storefront.infrastructure.bootstrap import build_context
from storefront.infrastructure.cli.admin_screen import admin_screen, show_product_table
from storefront.infrastructure.cli.cart_screen import cart_screen
from storefront.infrastructure.cli.customer_screen import customer_screen, render_catalog
from storefront.infrastructure.logging_config import LOG_LEVELS, setup_logging

logger = logging.getLogger(__name__)

SCREENS = {
    "admin": admin_screen,
    "catalog": customer_screen,
    "cart": cart_screen,
}
MENU = click.Choice([*SCREENS, "products", "quit"], case_sensitive=False)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Console log level.",
)
def cli(log_level: str) -> None:
    """Storefront, a tiny in-memory shop."""
    setup_logging(log_level)


@cli.command("shop")
@click.option("--seed", is_flag=True, default=False, help="Preload demo products.")
def shop(seed: bool) -> None:
    """Run an interactive shopping session."""
    ctx = build_context(seed=seed)
    logger.info("Session started with %d products", len(ctx.registry.list_all()))

    while True:
        click.echo()
        click.echo(f"Menu: admin | catalog | cart ({len(ctx.cart)} items) | products | quit")
        choice = click.prompt("Go to", type=MENU, default="catalog")

        if choice == "quit":
            click.echo("Goodbye!")
            return
        if choice == "products":
            show_product_table(ctx)
            continue
        SCREENS[choice](ctx)


@cli.command("catalog")
@click.option("--seed", is_flag=True, default=False, help="Preload demo products.")
def catalog(seed: bool) -> None:
    """Print the customer catalog grouped by category."""
    render_catalog(build_context(seed=seed))
