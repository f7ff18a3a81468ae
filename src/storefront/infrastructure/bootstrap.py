"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Settings come from
the environment so the CLI can point at another backend without flags.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from storefront.application.order_client import OrderClient
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.config import StoreConfig
from storefront.infrastructure.http.payments_api import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    PaymentsApi,
)
from storefront.infrastructure.persistence.json_active_order_store import (
    JsonActiveOrderStore,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_BASE_URL
    timeout: float | None = DEFAULT_TIMEOUT
    data_dir: Path = _DATA_DIR
    log_file: Path | None = None

    @staticmethod
    def from_env() -> Settings:
        raw_timeout = os.environ.get("STOREFRONT_TIMEOUT")
        try:
            timeout = DEFAULT_TIMEOUT if raw_timeout is None else float(raw_timeout)
        except ValueError as exc:
            raise ValidationError(
                f"STOREFRONT_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from exc

        log_file = os.environ.get("STOREFRONT_LOG_FILE")
        return Settings(
            api_url=os.environ.get("STOREFRONT_API_URL", DEFAULT_BASE_URL),
            # Zero disables the timeout entirely.
            timeout=timeout or None,
            data_dir=Path(os.environ.get("STOREFRONT_DATA_DIR", _DATA_DIR)),
            log_file=Path(log_file) if log_file else None,
        )


def payments_api(settings: Settings | None = None) -> PaymentsApi:
    settings = settings or Settings.from_env()
    return PaymentsApi(base_url=settings.api_url, timeout=settings.timeout)


def active_order_store(settings: Settings | None = None) -> JsonActiveOrderStore:
    settings = settings or Settings.from_env()
    return JsonActiveOrderStore(settings.data_dir / "active_order.json")


def order_client(
    api: PaymentsApi,
    settings: Settings | None = None,
    on_live_mode: Callable[[StoreConfig], None] | None = None,
) -> OrderClient:
    return OrderClient(
        gateway=api,
        active_order_store=active_order_store(settings),
        on_live_mode=on_live_mode,
    )
