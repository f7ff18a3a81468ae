import logging

import click

from storefront.domain.exceptions import StorefrontException
from storefront.infrastructure.bootstrap import Settings
from storefront.infrastructure.cli.config_commands import config_show
from storefront.infrastructure.cli.order_commands import (
    order_active,
    order_create,
    order_pay,
    order_status,
)
from storefront.infrastructure.cli.product_commands import price_format, product_list
from storefront.infrastructure.logging_setup import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log requests and responses.")
def cli(verbose: bool) -> None:
    """Storefront: order client for the payments backend"""
    try:
        log_file = Settings.from_env().log_file
    except StorefrontException as exc:
        raise click.ClickException(str(exc))
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)


@cli.group()
def order() -> None:
    """Create, pay and look up orders."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


# Register subcommands
cli.add_command(config_show)
cli.add_command(price_format)
order.add_command(order_active)
order.add_command(order_create)
order.add_command(order_pay)
order.add_command(order_status)
product.add_command(product_list)
