"""Order-side records: local line items and the remote Order.

Line items are the only order data the client builds itself. The Order
is created and owned by the backend; the client keeps the payload as
returned and remembers nothing but its id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.exceptions import ParseError, ValidationError
from storefront.domain.model.value_objects import Quantity

# Placeholder business rule: real total computation is not implemented.
ORDER_TOTAL = 100


@dataclass(frozen=True)
class LineItem:
    """A SKU reference and how many units of it to order."""

    sku: str
    quantity: Quantity

    def __post_init__(self) -> None:
        if not self.sku or not self.sku.strip():
            raise ValidationError("Line item SKU is required")

    def to_api_item(self) -> dict[str, Any]:
        """Shape expected by the Orders API."""
        return {
            "type": "sku",
            "parent": self.sku,
            "quantity": self.quantity.value,
        }

    @staticmethod
    def of(sku: str, quantity: int) -> LineItem:
        return LineItem(sku=sku, quantity=Quantity(quantity))


@dataclass
class Order:
    """An order as returned by the create-order call.

    Only ``id`` is guaranteed; the remaining attributes are read from the
    payload when present. ``raw`` always holds the full response object.
    """

    id: str
    status: str | None = None
    currency: str | None = None
    amount: int | None = None
    email: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @staticmethod
    def from_api(raw: Any) -> Order:
        if not isinstance(raw, dict) or not raw.get("id"):
            raise ParseError(f"Malformed order record: {raw!r}")
        return Order(
            id=str(raw["id"]),
            status=raw.get("status"),
            currency=raw.get("currency"),
            amount=raw.get("amount"),
            email=raw.get("email"),
            raw=raw,
        )
