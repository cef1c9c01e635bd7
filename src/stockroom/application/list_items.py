"""Application services for the home view: item list and search."""

from __future__ import annotations

from stockroom.application.dto import HomeState, ItemDTO
from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from stockroom.domain.model.item import Item
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.logging import get_logger

PRODUCT_NOT_FOUND = "Product not found"

logger = get_logger(__name__)


class HomeViewModel:
    """Keeps ``state`` in sync with the full item list."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo
        self.state = HomeState()
        self._subscription = item_repo.observe_all(self._on_items)

    def _on_items(self, items: list[Item]) -> None:
        self.state = HomeState(items=[ItemDTO.from_item(item) for item in items])

    def search(self, query: str) -> ItemDTO:
        return SearchItemHandler(self._item_repo).handle(query)

    def close(self) -> None:
        self._subscription.cancel()


class SearchItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, query: str) -> ItemDTO:
        """Find the item the user typed, so the caller can open its detail.

        Raises EntityNotFoundError when nothing matches.
        """
        if not query or not query.strip():
            raise ValidationError("Search query is required")

        item = self._item_repo.find_by_query(query)
        if item is None:
            logger.info("Search for %r found nothing", query)
            raise EntityNotFoundError(PRODUCT_NOT_FOUND)

        logger.info("Search for %r matched item #%s", query, item.id)
        return ItemDTO.from_item(item)
