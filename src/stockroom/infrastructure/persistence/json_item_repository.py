"""JSON-file-backed implementation of ItemRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Money
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
from stockroom.logging import get_logger

logger = get_logger(__name__)


class JsonItemRepository(ItemRepository):
    """Items stored as a JSON array in a single file.

    Every read goes back to disk; the file is small and this keeps
    separate CLI invocations consistent with each other.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._stream = ItemStream()
        self._ensure_file()

    # --- ItemRepository interface ---------------------------------------------

    def next_id(self) -> int:
        records = self._load_raw()
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def get_by_id(self, item_id: int) -> Item | None:
        for raw in self._load_raw():
            if raw["id"] == item_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Item]:
        return sort_by_name([self._to_domain(raw) for raw in self._load_raw()])

    def find_by_query(self, text: str) -> Item | None:
        return match_query(self.list_all(), text)

    def observe(self, item_id: int, listener: ItemListener) -> Subscription:
        return self._stream.subscribe_item(item_id, listener, self.get_by_id(item_id))

    def observe_all(self, listener: ListListener) -> Subscription:
        return self._stream.subscribe_list(listener, self.list_all())

    def insert(self, item: Item) -> None:
        records = self._load_raw()
        if any(raw["id"] == item.id for raw in records):
            raise ValidationError(f"Item #{item.id} already exists")
        records.append(self._to_raw(item))
        self._persist_raw(records)
        logger.debug("Inserted item #%s into %s", item.id, self._file_path)
        self._publish(item.id, item)

    def update(self, item: Item) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["id"] == item.id:
                records[i] = self._to_raw(item)
                break
        else:
            raise EntityNotFoundError(f"Item #{item.id} not found")
        self._persist_raw(records)
        logger.debug("Updated item #%s in %s", item.id, self._file_path)
        self._publish(item.id, item)

    def delete(self, item_id: int) -> None:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != item_id]
        if len(remaining) == len(records):
            raise EntityNotFoundError(f"Item #{item_id} not found")
        self._persist_raw(remaining)
        logger.debug("Deleted item #%s from %s", item_id, self._file_path)
        self._publish(item_id, None)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: Item) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "price": str(item.price.amount),
            "currency": item.price.currency,
            "quantity": item.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Item:
        return Item(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=raw["quantity"],
        )

    # --- File helpers ---------------------------------------------------------

    def _publish(self, item_id: int, item: Item | None) -> None:
        self._stream.publish(item_id, item, self.list_all)

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
