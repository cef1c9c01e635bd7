"""Abstract repository for the Item aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory fakes)
live elsewhere.

Reads come in two flavours: one-shot (``get_by_id``, ``list_all``) and
reactive (``observe``, ``observe_all``), where the listener receives
the current value immediately and again after every write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.item import Item
from stockroom.domain.repository.item_stream import (
    ItemListener,
    ListListener,
    Subscription,
)


class ItemRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique item ID."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> Item | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item, ordered by name."""

    @abstractmethod
    def find_by_query(self, text: str) -> Item | None:
        """Case-insensitive search by name.

        An exact name match wins; otherwise the first item, by name,
        whose name contains *text*.
        """

    @abstractmethod
    def observe(self, item_id: int, listener: ItemListener) -> Subscription:
        """Stream ``Item | None`` for *item_id* to *listener*."""

    @abstractmethod
    def observe_all(self, listener: ListListener) -> Subscription:
        """Stream the full, name-ordered item list to *listener*."""

    @abstractmethod
    def insert(self, item: Item) -> None:
        """Persist a new item. Raises ValidationError if the ID is taken."""

    @abstractmethod
    def update(self, item: Item) -> None:
        """Replace an existing item by value.

        Raises EntityNotFoundError if no item has ``item.id``.
        """

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Remove an item. Raises EntityNotFoundError if it does not exist."""


def match_query(items: list[Item], text: str) -> Item | None:
    """Shared search rule for ``find_by_query`` implementations.

    *items* must already be ordered by name.
    """
    needle = text.strip().lower()
    if not needle:
        return None
    for item in items:
        if item.name.lower() == needle:
            return item
    for item in items:
        if needle in item.name.lower():
            return item
    return None


def sort_by_name(items: list[Item]) -> list[Item]:
    return sorted(items, key=lambda item: (item.name.lower(), item.id))
