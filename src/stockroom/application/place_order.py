"""Application service: Place Order use case and the confirmation view.

The detail view validated the quantity when the user submitted it.
By the time the confirmation opens, stock may have moved, so the item
is read again and the decrement only happens if there is still enough.
This is a single best-effort write: no transaction guards against a
concurrent order on another device.
"""

from __future__ import annotations

from stockroom.application.dto import OrderIntent, OrderReceiptDTO
from stockroom.application.list_items import PRODUCT_NOT_FOUND
from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Quantity
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.logging import get_logger

logger = get_logger(__name__)


class PlaceOrderHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, intent: OrderIntent) -> OrderReceiptDTO:
        """Decrement stock for *intent* if it still fits.

        Steps:
        1. Read the item once (fail if it no longer exists).
        2. If ``stock >= ordered``, write back ``stock - ordered``.
        3. Return a receipt; ``remaining`` is clamped at zero.
        """
        quantity = Quantity(intent.quantity)

        item = self._item_repo.get_by_id(intent.item_id)
        if item is None:
            raise EntityNotFoundError(PRODUCT_NOT_FOUND)

        placed = item.quantity >= quantity.value
        if placed:
            self._item_repo.update(item.remove_stock(quantity))
            logger.info(
                "Order placed: %d x item #%s, stock %d -> %d",
                quantity.value, item.id, item.quantity, item.quantity - quantity.value,
            )
        else:
            logger.warning(
                "Order for %d x item #%s not placed: only %d in stock",
                quantity.value, item.id, item.quantity,
            )

        return _to_receipt(
            item,
            quantity.value,
            remaining=max(0, item.quantity - quantity.value),
            placed=placed,
        )


class OrderConfirmationViewModel:
    """Runs the order once on creation, then mirrors the item.

    The receipt keeps following the repository: if the item's price or
    name is edited while the confirmation is open, ``state`` reflects
    it. After a successful placement the stored stock already has the
    order deducted, so it is shown as-is.
    """

    def __init__(self, item_repo: ItemRepository, intent: OrderIntent) -> None:
        self.intent = intent
        self.receipt = PlaceOrderHandler(item_repo).handle(intent)
        self.state = self.receipt
        self._subscription = item_repo.observe(intent.item_id, self._on_item)

    def _on_item(self, item: Item | None) -> None:
        if item is None:
            self.state = OrderReceiptDTO(
                item_id=self.intent.item_id,
                item_name=None,
                unit_price=None,
                quantity_ordered=self.intent.quantity,
                total_cost=None,
                remaining_items=0,
                placed=self.receipt.placed,
            )
            return

        if self.receipt.placed:
            remaining = item.quantity
        else:
            remaining = max(0, item.quantity - self.intent.quantity)
        self.state = _to_receipt(
            item, self.intent.quantity, remaining=remaining, placed=self.receipt.placed
        )

    def close(self) -> None:
        self._subscription.cancel()


def _to_receipt(item: Item, quantity: int, remaining: int, placed: bool) -> OrderReceiptDTO:
    return OrderReceiptDTO(
        item_id=item.id,
        item_name=item.name,
        unit_price=str(item.price),
        quantity_ordered=quantity,
        total_cost=str(item.price * quantity),
        remaining_items=remaining,
        placed=placed,
    )
