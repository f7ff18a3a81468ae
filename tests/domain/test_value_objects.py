"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import _NBSP, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_from_minor_units(self):
        m = Money.from_minor_units(1000, "USD")
        assert m.amount == Decimal("10.00")

    def test_from_minor_units_rounds_to_cents(self):
        assert Money.from_minor_units("1234.5", "USD").amount == Decimal("12.35")

    def test_currency_is_normalized(self):
        assert Money.from_minor_units(100, "eur").currency == "EUR"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_invalid_currency_rejected(self):
        with pytest.raises(ValidationError, match="Invalid currency"):
            Money(Decimal("1"), "US")

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.from_minor_units("ten", "USD")

    def test_usd_formatting(self):
        assert Money.from_minor_units(1000, "USD").format() == "$10.00"
        assert Money.from_minor_units(5, "USD").format() == "$0.05"

    def test_thousands_separator(self):
        assert str(Money.from_minor_units(123456789, "USD")) == "$1,234,567.89"

    def test_other_symbols(self):
        assert Money.from_minor_units(999, "EUR").format() == "€9.99"
        assert Money.from_minor_units(999, "GBP").format() == "£9.99"

    def test_unknown_currency_uses_code(self):
        assert Money.from_minor_units(2500, "CHF").format() == f"CHF{_NBSP}25.00"

    def test_format_negative_minor_units(self):
        assert Money.format_minor_units(-500, "USD") == "-$5.00"
        assert Money.format_minor_units(-250000, "CHF") == f"-CHF{_NBSP}2,500.00"

    def test_format_positive_minor_units(self):
        assert Money.format_minor_units(1000, "USD") == "$10.00"

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.from_minor_units("NaN", "USD")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity("2")

    def test_str(self):
        assert str(Quantity(7)) == "7"
