"""CLI command for the store configuration."""

from __future__ import annotations

import click

from storefront.domain.model.config import StoreConfig
from storefront.infrastructure.cli.common import run_with_client

DEMO_NOTICE = "Demo mode: test keys in use, no real payments will be made."


@click.command("config")
def config_show() -> None:
    """Show the backend configuration."""
    notice = {"visible": True}

    def hide_demo_notice(_config: StoreConfig) -> None:
        notice["visible"] = False

    config = run_with_client(
        lambda client: client.get_config(), on_live_mode=hide_demo_notice
    )

    click.echo(f"Publishable key: {config.publishable_key}")
    click.echo(f"Mode:            {'live' if config.is_live_mode else 'test'}")
    if notice["visible"]:
        click.echo()
        click.echo(DEMO_NOTICE)
