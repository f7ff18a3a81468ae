"""Product record.

Products are owned by the remote backend; the client only reads them.
Price fields are optional because the catalog may describe products whose
price lives on a nested SKU.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.exceptions import ParseError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the remote catalog."""

    id: str
    name: str = ""
    price: int | None = None  # minor units
    currency: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def unit_price(self) -> Money | None:
        if self.price is None or not self.currency:
            return None
        return Money.from_minor_units(self.price, self.currency)

    @staticmethod
    def from_api(raw: Any) -> Product:
        if not isinstance(raw, dict) or not raw.get("id"):
            raise ParseError(f"Malformed product record: {raw!r}")
        return Product(
            id=str(raw["id"]),
            name=raw.get("name") or "",
            price=raw.get("price"),
            currency=raw.get("currency"),
            raw=raw,
        )
