"""Abstract gateway to the remote payments backend.

Implementations return decoded JSON objects and raise GatewayError
subclasses for every failure, so the application layer never sees
transport details.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PaymentsGateway(ABC):

    @abstractmethod
    async def get_config(self) -> dict[str, Any]:
        """Return the store configuration object."""

    @abstractmethod
    async def list_products(self) -> dict[str, Any]:
        """Return the catalog response, ``{"data": [...]}``."""

    @abstractmethod
    async def create_order(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create an order; the response carries it under ``order``."""

    @abstractmethod
    async def pay_order(self, order_id: str, source: Any) -> dict[str, Any]:
        """Pay an existing order with a payment source."""

    @abstractmethod
    async def get_order(self, order_id: str) -> dict[str, Any]:
        """Return the current state of an order."""
