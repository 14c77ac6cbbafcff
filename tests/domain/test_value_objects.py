"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, OrderNumber, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_normalizes_to_cents(self):
        assert str(Money.of(10).amount) == "10.00"
        assert str(Money.of(Decimal("50.0")).amount) == "50.00"

    def test_zero_is_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_sub_cent_amount_rejected(self):
        with pytest.raises(ValidationError, match="finer than one cent"):
            Money.of("10.005")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("Infinity")

    @pytest.mark.parametrize("raw", ["1e30", "-1e30", "1000000000000000.01"])
    def test_huge_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of(raw)

    def test_largest_amount_allowed(self):
        assert Money.of("1000000000000000").to_plain() == "1000000000000000.00"

    def test_multiplication_past_the_limit_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of("999999999999999.99") * 1000

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_no_drift_over_many_additions(self):
        total = Money.zero()
        for _ in range(1000):
            total = total + Money.of("0.10")
        assert total == Money.of("100.00")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert Money.of("9.5").to_plain() == "9.50"


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
            Quantity(1.5)


# ── OrderNumber ──────────────────────────────────────────────────────────────


class TestOrderNumber:

    def test_zero_padded_with_prefix(self):
        assert OrderNumber(1).value == "PED00001"
        assert str(OrderNumber(123)) == "PED00123"

    def test_grows_past_five_digits(self):
        assert OrderNumber(100000).value == "PED100000"

    def test_parse(self):
        assert OrderNumber.parse("PED00042") == OrderNumber(42)

    @pytest.mark.parametrize("raw", ["", "PED", "PED12", "XYZ00001", "PED00000", "ped00001x"])
    def test_parse_rejects_malformed(self, raw):
        with pytest.raises(ValidationError):
            OrderNumber.parse(raw)

    def test_non_positive_sequence_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            OrderNumber(0)
