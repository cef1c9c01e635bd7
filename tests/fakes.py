"""In-memory fake repository for testing.

Implements the same abstract interface as the JSON repository but keeps
everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from stockroom.domain.model.item import Item
from stockroom.domain.repository.item_repository import (
    ItemRepository,
    match_query,
    sort_by_name,
)
from stockroom.domain.repository.item_stream import (
    ItemListener,
    ItemStream,
    ListListener,
    Subscription,
)


class FakeItemRepository(ItemRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._store: dict[int, Item] = {}
        self._stream = ItemStream()
        self.update_calls = 0
        for item in items or []:
            self._store[item.id] = item

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def get_by_id(self, item_id: int) -> Item | None:
        return self._store.get(item_id)

    def list_all(self) -> list[Item]:
        return sort_by_name(list(self._store.values()))

    def find_by_query(self, text: str) -> Item | None:
        return match_query(self.list_all(), text)

    def observe(self, item_id: int, listener: ItemListener) -> Subscription:
        return self._stream.subscribe_item(item_id, listener, self.get_by_id(item_id))

    def observe_all(self, listener: ListListener) -> Subscription:
        return self._stream.subscribe_list(listener, self.list_all())

    def insert(self, item: Item) -> None:
        if item.id in self._store:
            raise ValidationError(f"Item #{item.id} already exists")
        self._store[item.id] = item
        self._stream.publish(item.id, item, self.list_all)

    def update(self, item: Item) -> None:
        if item.id not in self._store:
            raise EntityNotFoundError(f"Item #{item.id} not found")
        self.update_calls += 1
        self._store[item.id] = item
        self._stream.publish(item.id, item, self.list_all)

    def delete(self, item_id: int) -> None:
        if item_id not in self._store:
            raise EntityNotFoundError(f"Item #{item_id} not found")
        del self._store[item_id]
        self._stream.publish(item_id, None, self.list_all)

    def has_subscribers(self) -> bool:
        return self._stream.has_subscribers()
