"""CLI commands for the product catalog and price formatting."""

from __future__ import annotations

import click

from storefront.application.order_client import OrderClient
from storefront.domain.exceptions import StorefrontException
from storefront.infrastructure.cli.common import run_with_client


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = run_with_client(lambda client: client.load_products())

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<24} {'Name':<24} {'Price':>12}")
    click.echo("-" * 62)
    try:
        for p in products.values():
            price = str(p.unit_price) if p.unit_price is not None else "-"
            click.echo(f"{p.id:<24} {p.name:<24} {price:>12}")
    except StorefrontException as exc:
        raise click.ClickException(str(exc))


@click.command("price")
@click.argument("amount", type=int)
@click.argument("currency")
def price_format(amount: int, currency: str) -> None:
    """Format AMOUNT minor units of CURRENCY, e.g. `price 1000 USD`."""
    try:
        click.echo(OrderClient.format_price(amount, currency))
    except StorefrontException as exc:
        raise click.ClickException(str(exc))
