"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount") as exc_info:
            Money.of("ten")
        assert exc_info.value.field == "amount"

    def test_of_factory_rejects_bool(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(True)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("NaN"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_zero(self):
        assert Money.zero() == Money.of("0")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_non_int_rejected(self):
        with pytest.raises(TypeError, match="Can only multiply Money by int"):
            Money.of("7.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_format_with_symbol_and_thousands(self):
        assert Money.of("45000").format("₱") == "₱45,000.00"
        assert Money.of("1234567.891").format("€") == "€1,234,567.89"
