"""CLI commands for orders."""

from __future__ import annotations

import json

import click

from storefront.application.order_client import OrderClient
from storefront.domain.exceptions import StorefrontException
from storefront.domain.model.order import LineItem
from storefront.infrastructure.bootstrap import Settings, active_order_store
from storefront.infrastructure.cli.common import run_with_client


def _parse_items(raw: str) -> list[LineItem]:
    """Parse 'sku_A:3,sku_B:5' into a LineItem list."""
    items: list[LineItem] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'SKU:Quantity'."
            )
        sku, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for SKU '{sku}'."
            )
        try:
            items.append(LineItem.of(sku.strip(), qty))
        except StorefrontException as exc:
            raise click.BadParameter(str(exc))
    return items


def _parse_metadata(pairs: tuple[str, ...]) -> dict[str, str] | None:
    """Parse ('key=value', ...) into a dict."""
    if not pairs:
        return None
    metadata: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid metadata '{pair}'. Expected 'key=value'."
            )
        key, value = pair.split("=", 1)
        metadata[key.strip()] = value
    return metadata


def _shipping(
    name: str | None,
    line1: str | None,
    city: str | None,
    postal_code: str | None,
    country: str | None,
) -> dict | None:
    if not name:
        return None
    return {
        "name": name,
        "address": {
            "line1": line1,
            "city": city,
            "postal_code": postal_code,
            "country": country,
        },
    }


def _active_order_id() -> str | None:
    try:
        return active_order_store(Settings.from_env()).get()
    except StorefrontException as exc:
        raise click.ClickException(str(exc))


def _resolve_order_id(order_id: str | None) -> str:
    """Fall back to the active order when no id was given."""
    if order_id:
        return order_id
    active = _active_order_id()
    if active is None:
        raise click.ClickException("No --id given and no active order.")
    return active


@click.command("create")
@click.option("--currency", required=True, help="Three-letter currency code, e.g. usd.")
@click.option("--items", required=True, help="Items as 'SKU:Qty,SKU:Qty'.")
@click.option("--email", default=None, help="Customer email.")
@click.option("--name", default=None, help="Shipping name (enables shipping).")
@click.option("--address-line1", default=None, help="Shipping address line.")
@click.option("--city", default=None, help="Shipping city.")
@click.option("--postal-code", default=None, help="Shipping postal code.")
@click.option("--country", default=None, help="Shipping country code.")
@click.option("--meta", multiple=True, help="Metadata entry 'key=value' (repeatable).")
def order_create(
    currency: str,
    items: str,
    email: str | None,
    name: str | None,
    address_line1: str | None,
    city: str | None,
    postal_code: str | None,
    country: str | None,
    meta: tuple[str, ...],
) -> None:
    """Create an order and make it the active one."""
    line_items = _parse_items(items)
    shipping = _shipping(name, address_line1, city, postal_code, country)
    metadata = _parse_metadata(meta)

    async def _create(client: OrderClient):
        client.line_items.extend(line_items)
        return await client.create_order(
            currency,
            email=email,
            shipping=shipping,
            metadata=metadata,
        )

    order = run_with_client(_create)

    click.echo(f"Order {order.id} created  (status={order.status or 'unknown'})")
    if order.amount is not None and order.currency:
        click.echo(f"Amount: {OrderClient.format_price(order.amount, order.currency)}")
    click.echo(f"  {'SKU':<30} {'Qty':>5}")
    click.echo(f"  {'-'*36}")
    for item in line_items:
        click.echo(f"  {item.sku:<30} {item.quantity.value:>5}")


@click.command("pay")
@click.option("--id", "order_id", default=None, help="Order ID (defaults to the active order).")
@click.option("--source", required=True, help="Payment source id or token.")
def order_pay(order_id: str | None, source: str) -> None:
    """Pay an order with a payment source."""
    resolved = _resolve_order_id(order_id)
    result = run_with_client(lambda client: client.pay_order(resolved, source))

    click.echo(f"Order {resolved} paid.")
    order = result.get("order")
    status = (order if isinstance(order, dict) else result).get("status")
    if status:
        click.echo(f"Status: {status}")


@click.command("status")
@click.option("--id", "order_id", default=None, help="Order ID (defaults to the active order).")
def order_status(order_id: str | None) -> None:
    """Show the backend's view of an order."""
    resolved = _resolve_order_id(order_id)
    result = run_with_client(lambda client: client.get_order_status(resolved))
    click.echo(json.dumps(result, indent=2, sort_keys=True))


@click.command("active")
def order_active() -> None:
    """Print the id of the most recently created order."""
    order_id = _active_order_id()
    if order_id is None:
        click.echo("No active order.")
        return
    click.echo(order_id)
