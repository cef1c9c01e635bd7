"""Value Objects shared across the domain.

Immutable, compared by value. Construction validates, so an invalid
price or order quantity never makes it past the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from stockroom.domain.exceptions import InvalidQuantityError, ValidationError

_CENTS = Decimal("0.01")

# Largest unit count anywhere in the system (a 32-bit signed int).
MAX_QUANTITY = 2**31 - 1

# Largest price accepted from input. Any price times MAX_QUANTITY still
# fits the default Decimal context when rounded to cents.
MAX_PRICE = Decimal("1000000000")

# Whole-number digits beyond which an amount can no longer be rounded to
# cents within 28 significant digits.
_MAX_INTEGER_DIGITS = 26


@dataclass(frozen=True)
class Money:
    """A non-negative price in a single currency.

    Decimal-backed so that ``price * quantity`` totals on a receipt are
    exact.
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
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount != 0 and self.amount.adjusted() >= _MAX_INTEGER_DIGITS:
            raise ValidationError(f"Money amount is too large, got {self.amount}")

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        if factor < 0:
            raise ValidationError("Cannot multiply Money by a negative factor")
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        return f"${self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP):,}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce user or file input to a price, rejecting garbage."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc
        if value.is_finite() and value > MAX_PRICE:
            raise ValidationError(f"Price cannot exceed {Money(MAX_PRICE)}")
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive number of units to order."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError()
        if not 0 < self.value <= MAX_QUANTITY:
            raise InvalidQuantityError()

    def __str__(self) -> str:
        return str(self.value)
