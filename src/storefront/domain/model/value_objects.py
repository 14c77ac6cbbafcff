"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CENT = Decimal("0.01")
# Largest amount a single Money may hold; keeps cent quantization exact.
MAX_AMOUNT = Decimal("1000000000000000")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so line totals and order totals add up exactly. Amounts
    finer than one cent are rejected rather than rounded.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if abs(self.amount) > MAX_AMOUNT:
            raise ValidationError(
                f"Money amount cannot exceed {MAX_AMOUNT}, got {self.amount}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount != self.amount.quantize(CENT):
            raise ValidationError(
                f"Money amount cannot be finer than one cent, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def to_plain(self) -> str:
        """Amount as a two-decimal string without currency symbol."""
        return f"{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to a cent-precision Decimal."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if value.is_finite() and abs(value) <= MAX_AMOUNT and value == value.quantize(CENT):
            value = value.quantize(CENT)
        return Money(value)


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


ORDER_NUMBER_PREFIX = "PED"
ORDER_NUMBER_WIDTH = 5
_ORDER_NUMBER_RE = re.compile(rf"^{ORDER_NUMBER_PREFIX}(\d{{{ORDER_NUMBER_WIDTH},}})$")


@dataclass(frozen=True, order=True)
class OrderNumber:
    """Human-facing order identifier, e.g. ``PED00042``.

    Derived purely from the allocated sequence value. Sequences past
    99999 simply grow wider.
    """

    sequence: int

    def __post_init__(self) -> None:
        if isinstance(self.sequence, bool) or not isinstance(self.sequence, int):
            raise ValidationError("Order number sequence must be an integer")
        if self.sequence <= 0:
            raise ValidationError("Order number sequence must be positive")

    @property
    def value(self) -> str:
        return f"{ORDER_NUMBER_PREFIX}{self.sequence:0{ORDER_NUMBER_WIDTH}d}"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(raw: str) -> OrderNumber:
        match = _ORDER_NUMBER_RE.match(raw.strip()) if raw else None
        if match is None:
            raise ValidationError(f"Invalid order number: {raw!r}")
        return OrderNumber(int(match.group(1)))
