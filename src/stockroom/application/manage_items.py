"""Application services: item entry, edit, delete and lookup.

Editing an item does not touch past orders: a receipt captured the
price when it was produced.
"""

from __future__ import annotations

from stockroom.application.dto import ItemDTO
from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Money
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.logging import get_logger

logger = get_logger(__name__)


class AddItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, name: str, price: str, quantity: int) -> ItemDTO:
        """Add a new item to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")

        _reject_duplicate_name(self._item_repo, name)

        item = Item(
            id=self._item_repo.next_id(),
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
        )
        self._item_repo.insert(item)
        logger.info("Added item #%s %r", item.id, item.name)
        return ItemDTO.from_item(item)


class UpdateItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(
        self,
        item_id: int,
        name: str | None = None,
        price: str | None = None,
        quantity: int | None = None,
    ) -> ItemDTO:
        """Change any of name, price and stock; omitted fields stay."""
        item = _require(self._item_repo, item_id)

        new_name = item.name
        if name is not None:
            new_name = name.strip()
            if new_name.lower() != item.name.lower():
                _reject_duplicate_name(self._item_repo, new_name)

        updated = Item(
            id=item.id,
            name=new_name,
            price=Money.of(price) if price is not None else item.price,
            quantity=quantity if quantity is not None else item.quantity,
        )
        self._item_repo.update(updated)
        logger.info("Updated item #%s", item.id)
        return ItemDTO.from_item(updated)


class DeleteItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item_id: int) -> None:
        _require(self._item_repo, item_id)
        self._item_repo.delete(item_id)
        logger.info("Deleted item #%s", item_id)


class ShowItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item_id: int) -> ItemDTO:
        return ItemDTO.from_item(_require(self._item_repo, item_id))


def _require(item_repo: ItemRepository, item_id: int) -> Item:
    item = item_repo.get_by_id(item_id)
    if item is None:
        raise EntityNotFoundError(f"Item #{item_id} not found")
    return item


def _reject_duplicate_name(item_repo: ItemRepository, name: str) -> None:
    wanted = name.strip().lower()
    if any(existing.name.lower() == wanted for existing in item_repo.list_all()):
        raise ValidationError(f"Item '{name.strip()}' already exists")
