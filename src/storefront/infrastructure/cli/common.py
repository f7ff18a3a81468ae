"""Glue between synchronous click commands and the async OrderClient."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from storefront.application.order_client import OrderClient
from storefront.domain.exceptions import StorefrontException
from storefront.domain.model.config import StoreConfig
from storefront.infrastructure.bootstrap import Settings, order_client, payments_api

T = TypeVar("T")


def run_with_client(
    action: Callable[[OrderClient], Awaitable[T]],
    on_live_mode: Callable[[StoreConfig], None] | None = None,
) -> T:
    """Build a client, run *action* against it, and close the HTTP session.

    Domain errors become ClickExceptions so every command reports them
    the same way.
    """

    async def _run() -> T:
        settings = Settings.from_env()
        async with payments_api(settings) as api:
            client = order_client(api, settings, on_live_mode=on_live_mode)
            return await action(client)

    try:
        return asyncio.run(_run())
    except StorefrontException as exc:
        raise click.ClickException(str(exc))
