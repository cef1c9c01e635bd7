"""Domain service: order quantity validation.

The quantity arrives as free text from the user. Two checks use the
same rules:

- ``check_quantity`` runs on every keystroke and produces inline
  feedback. Blank input is not an error yet, the user just hasn't
  typed anything.
- ``validate_order`` is the accept/reject decision made once, when the
  order is submitted. Blank input is rejected there.

There is no retry and no partial fill.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from stockroom.domain.exceptions import InsufficientStockError, InvalidQuantityError
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import MAX_QUANTITY

INVALID_QUANTITY_MESSAGE = "Invalid quantity"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAX_DIGITS = len(str(MAX_QUANTITY))


@dataclass(frozen=True)
class QuantityCheck:
    quantity: int | None
    has_error: bool
    error_message: str | None


def parse_quantity(text: str | None) -> int | None:
    """Parse a base-10 integer, or return None for blank/garbage input.

    Numbers outside the range a stock count can hold are garbage too.
    """
    if text is None:
        return None
    candidate = text.strip()
    if not _INTEGER.fullmatch(candidate):
        return None
    digits = candidate.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return None
    value = -int(digits) if candidate.startswith("-") else int(digits)
    if abs(value) > MAX_QUANTITY:
        return None
    return value


def check_quantity(text: str | None, item: Item | None) -> QuantityCheck:
    """Inline feedback for the quantity field.

    Stock is only compared when the item is known; while the item is
    still loading, a positive number is not flagged.
    """
    if text is None or not text.strip():
        return QuantityCheck(quantity=None, has_error=False, error_message=None)

    quantity = parse_quantity(text)
    if quantity is None or quantity <= 0:
        return QuantityCheck(
            quantity=quantity, has_error=True, error_message=INVALID_QUANTITY_MESSAGE
        )
    if item is not None and not item.can_fulfill(quantity):
        return QuantityCheck(
            quantity=quantity,
            has_error=True,
            error_message=str(InsufficientStockError(item.quantity)),
        )
    return QuantityCheck(quantity=quantity, has_error=False, error_message=None)


def validate_order(text: str | None, item: Item) -> int:
    """Accept or reject an order for *item*.

    Returns the parsed quantity when ``0 < N <= item.quantity``.
    Raises InvalidQuantityError or InsufficientStockError otherwise.
    """
    quantity = parse_quantity(text)
    if quantity is None or quantity <= 0:
        raise InvalidQuantityError(INVALID_QUANTITY_MESSAGE)
    if not item.can_fulfill(quantity):
        raise InsufficientStockError(item.quantity)
    return quantity
