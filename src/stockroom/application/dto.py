"""Data Transfer Objects: plain containers that cross layer boundaries.

The view models publish these as their ``state``. Prices are
pre-formatted strings so the CLI never touches Money.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stockroom.domain.model.item import Item


@dataclass(frozen=True)
class ItemDTO:
    """A single item as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$15.00"
    quantity: int

    @property
    def in_stock_label(self) -> str:
        return f"In stock: {self.quantity}"

    @staticmethod
    def from_item(item: Item) -> ItemDTO:
        return ItemDTO(
            id=item.id,
            name=item.name,
            price=item.formatted_price,
            quantity=item.quantity,
        )


@dataclass(frozen=True)
class OrderIntent:
    """Input to the confirmation view: which item, how many units."""

    item_id: int
    quantity: int


@dataclass(frozen=True)
class HomeState:
    items: list[ItemDTO] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class ProductDetailState:
    item: ItemDTO | None = None
    quantity_input: str = ""
    has_error: bool = False
    error_message: str | None = None


@dataclass(frozen=True)
class OrderReceiptDTO:
    """Output: what the confirmation view shows after an order.

    ``placed`` is False when stock ran out between the detail view and
    the confirmation; nothing was written in that case.
    """

    item_id: int
    item_name: str | None
    unit_price: str | None
    quantity_ordered: int
    total_cost: str | None
    remaining_items: int
    placed: bool

    @property
    def found(self) -> bool:
        return self.item_name is not None
