"""In-memory ActiveOrderStore. Nothing survives the process."""

from __future__ import annotations

from storefront.domain.repository.active_order_store import ActiveOrderStore


class InMemoryActiveOrderStore(ActiveOrderStore):

    def __init__(self, order_id: str | None = None) -> None:
        self._order_id = order_id

    def get(self) -> str | None:
        return self._order_id

    def set(self, order_id: str) -> None:
        self._order_id = str(order_id)
