"""Application service: product detail view.

Shows one item, takes the quantity the user wants to order and gives
inline feedback on it. Submitting hands an OrderIntent to the
confirmation step.
"""

from __future__ import annotations

from stockroom.application.dto import ItemDTO, OrderIntent, ProductDetailState
from stockroom.application.list_items import PRODUCT_NOT_FOUND
from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.model.item import Item
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.domain.service.order_validation import check_quantity, validate_order
from stockroom.logging import get_logger

logger = get_logger(__name__)


class ProductDetailViewModel:
    """State for the detail view of a single item.

    ``state`` is recomputed whenever the quantity text changes and
    whenever the repository reports a change to the item, so an
    "insufficient stock" message tracks the live stock level.
    """

    def __init__(
        self,
        item_repo: ItemRepository,
        item_id: int,
        quantity_input: str = "",
    ) -> None:
        self.item_id = item_id
        self._item: Item | None = None
        self._quantity_input = quantity_input
        self.state = ProductDetailState(quantity_input=quantity_input)
        self._subscription = item_repo.observe(item_id, self._on_item)

    def _on_item(self, item: Item | None) -> None:
        self._item = item
        self._refresh()

    def update_quantity(self, quantity: str) -> None:
        self._quantity_input = quantity
        self._refresh()

    def submit_order(self) -> OrderIntent:
        """Validate against the latest stock read and build the intent.

        Raises EntityNotFoundError if the item has gone away, or a
        ValidationError subclass if the quantity is rejected.
        """
        item = self._item
        if item is None:
            raise EntityNotFoundError(PRODUCT_NOT_FOUND)

        quantity = validate_order(self._quantity_input, item)
        logger.info("Order of %d x item #%s submitted", quantity, item.id)
        return OrderIntent(item_id=item.id, quantity=quantity)

    def close(self) -> None:
        self._subscription.cancel()

    def _refresh(self) -> None:
        check = check_quantity(self._quantity_input, self._item)
        self.state = ProductDetailState(
            item=ItemDTO.from_item(self._item) if self._item is not None else None,
            quantity_input=self._quantity_input,
            has_error=check.has_error,
            error_message=check.error_message,
        )
