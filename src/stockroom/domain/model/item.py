"""Item aggregate: one catalog entry with a price and a stock count.

The repository owns items. Everything above the domain layer works on
snapshots, so the mutators here return new instances instead of
changing the receiver.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from stockroom.domain.exceptions import InsufficientStockError, ValidationError
from stockroom.domain.model.value_objects import MAX_QUANTITY, Money, Quantity


@dataclass(frozen=True)
class Item:
    """A catalog entry.

    Invariants:
    - ``quantity`` is a whole number and never negative
    - ``name`` is never blank
    """

    id: int
    name: str
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Item name is required")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        if self.quantity > MAX_QUANTITY:
            raise ValidationError(f"Stock quantity cannot exceed {MAX_QUANTITY}")

    @property
    def formatted_price(self) -> str:
        return str(self.price)

    def can_fulfill(self, requested: int) -> bool:
        """True iff an order for *requested* units can be accepted."""
        return 0 < requested <= self.quantity

    def with_quantity(self, quantity: int) -> Item:
        return replace(self, quantity=quantity)

    def remove_stock(self, requested: Quantity) -> Item:
        """Return a snapshot with *requested* units taken out of stock.

        Raises InsufficientStockError rather than going below zero.
        """
        if requested.value > self.quantity:
            raise InsufficientStockError(self.quantity)
        return self.with_quantity(self.quantity - requested.value)
