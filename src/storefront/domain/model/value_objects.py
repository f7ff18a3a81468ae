"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

# Symbols used by en-US currency formatting. Anything not listed is
# rendered with its ISO code and a no-break space, e.g. "CHF\u00a010.00".
CURRENCY_SYMBOLS = {
    "AUD": "A$",
    "BRL": "R$",
    "CAD": "CA$",
    "CNY": "CN¥",
    "EUR": "€",
    "GBP": "£",
    "HKD": "HK$",
    "ILS": "₪",
    "INR": "₹",
    "JPY": "¥",
    "KRW": "₩",
    "MXN": "MX$",
    "NZD": "NZ$",
    "TWD": "NT$",
    "USD": "$",
    "VND": "₫",
}

_CENTS = Decimal("0.01")
_NBSP = "\u00a0"


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Amounts on the wire are integer minor units (cents). Only two-decimal
    currencies are handled correctly; zero-decimal currencies such as JPY
    will be off by a factor of 100.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if not self.currency or len(self.currency.strip()) != 3:
            raise ValidationError(f"Invalid currency code: {self.currency!r}")
        object.__setattr__(self, "currency", self.currency.strip().upper())

    # --- Display --------------------------------------------------------------

    def format(self) -> str:
        """Render as an en-US currency string, e.g. ``$1,234.50``."""
        rounded = self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{self.currency}{_NBSP}{rounded:,.2f}"
        return f"{symbol}{rounded:,.2f}"

    def __str__(self) -> str:
        return self.format()

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_minor_units(amount: int | str | Decimal, currency: str) -> Money:
        """Build from an amount in minor units (``1000`` -> ``10.00``)."""
        return Money(_to_major_units(amount), currency)

    @staticmethod
    def format_minor_units(amount: int | str | Decimal, currency: str) -> str:
        """Format minor units for display, sign included.

        Refunds and credits come through as negative amounts and render
        with a leading minus, e.g. ``-$5.00``.
        """
        major = _to_major_units(amount)
        text = Money(abs(major), currency).format()
        return f"-{text}" if major < 0 else text


def _to_major_units(amount: int | str | Decimal) -> Decimal:
    try:
        major = Decimal(str(amount)) / 100
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {amount!r}") from exc
    if not major.is_finite():
        raise ValidationError(f"Invalid money amount: {amount!r}")
    return major.quantize(_CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
