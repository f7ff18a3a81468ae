"""Application service: the Order Client.

Wraps the remote calls needed to check out (config, catalog, create
order, pay, status) around a little local state: loaded products, the
line items being ordered and the persisted active order id.

Each public coroutine is an independent request/response round trip.
Failures are raised as StorefrontException subclasses; no method returns
an error payload.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from storefront.domain.exceptions import EntityNotFoundError, ParseError, ValidationError
from storefront.domain.model.config import StoreConfig
from storefront.domain.model.order import ORDER_TOTAL, LineItem, Order
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.active_order_store import ActiveOrderStore
from storefront.domain.repository.payments_gateway import PaymentsGateway

logger = logging.getLogger(__name__)


class OrderClient:

    def __init__(
        self,
        gateway: PaymentsGateway,
        active_order_store: ActiveOrderStore,
        line_items: Iterable[LineItem] = (),
        on_live_mode: Callable[[StoreConfig], None] | None = None,
    ) -> None:
        self._gateway = gateway
        self._active_order_store = active_order_store
        self._on_live_mode = on_live_mode
        self.line_items: list[LineItem] = list(line_items)
        self.products: dict[str, Product] = {}
        self.display_order_summary()

    # --- Line items -----------------------------------------------------------

    def get_order_total(self) -> int:
        return ORDER_TOTAL

    def add_line_item(self, sku: str, quantity: int = 1) -> LineItem:
        item = LineItem.of(sku, quantity)
        self.line_items.append(item)
        return item

    def get_order_items(self) -> list[dict[str, Any]]:
        """Line items in the shape the Orders API expects."""
        return [item.to_api_item() for item in self.line_items]

    # --- Remote calls ---------------------------------------------------------

    async def get_config(self) -> StoreConfig:
        """Fetch the store configuration.

        When the publishable key is a live one, ``on_live_mode`` is called
        so the UI can hide its demo notice.
        """
        config = StoreConfig.from_api(await self._gateway.get_config())
        if config.is_live_mode and self._on_live_mode is not None:
            self._on_live_mode(config)
        return config

    async def load_products(self) -> dict[str, Product]:
        payload = await self._gateway.list_products()
        records = payload.get("data")
        if not isinstance(records, list):
            raise ParseError("Products response is missing a 'data' list")

        # Parse everything first so a bad record leaves the mapping untouched.
        parsed: dict[str, Product] = {}
        for record in records:
            product = Product.from_api(record)
            parsed[product.id] = product
        self.products.update(parsed)

        logger.debug("Loaded %d products", len(records))
        return self.products

    def get_product(self, product_id: str) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return product

    async def create_order(
        self,
        currency: str,
        items: list[dict[str, Any]] | None = None,
        email: str | None = None,
        shipping: dict[str, Any] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Order:
        """Create an order and remember it as the active one.

        *items* defaults to the client's own line items.
        """
        if not currency or not currency.strip():
            raise ValidationError("Currency is required")

        payload = {
            "currency": currency,
            "items": self.get_order_items() if items is None else items,
            "email": email,
            "shipping": shipping,
            "metadata": metadata,
        }
        data = await self._gateway.create_order(payload)

        order = Order.from_api(data.get("order"))
        self.set_active_order_id(order.id)
        logger.info("Created order %s", order.id)
        return order

    async def pay_order(self, order: Order | str, source: Any) -> dict[str, Any]:
        """Pay *order* (an Order or its id) with a payment source."""
        order_id = order.id if isinstance(order, Order) else order
        if not order_id:
            raise ValidationError("Order id is required")

        data = await self._gateway.pay_order(order_id, source)
        logger.info("Paid order %s", order_id)
        return data

    async def get_order_status(self, order_id: str) -> dict[str, Any]:
        if not order_id:
            raise ValidationError("Order id is required")
        return await self._gateway.get_order(order_id)

    async def get_active_order_status(self) -> dict[str, Any]:
        order_id = self.get_active_order_id()
        if order_id is None:
            raise EntityNotFoundError("No active order")
        return await self.get_order_status(order_id)

    # --- Formatting -----------------------------------------------------------

    @staticmethod
    def format_price(amount: int, currency: str) -> str:
        """Format minor units as an en-US currency string (1000, "USD" -> "$10.00").

        Assumes a two-decimal currency such as USD or EUR. Negative amounts
        keep their sign (-500 -> "-$5.00").
        """
        return Money.format_minor_units(amount, currency)

    # --- Active order ---------------------------------------------------------

    def set_active_order_id(self, order_id: str) -> None:
        self._active_order_store.set(order_id)

    def get_active_order_id(self) -> str | None:
        return self._active_order_store.get()

    # --- Presentation ---------------------------------------------------------

    def display_order_summary(self) -> None:
        """Hook for a UI to render the order summary. Does nothing here."""
