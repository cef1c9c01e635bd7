"""In-process change notification for item reads.

Repositories own one ItemStream and call ``publish`` after every write.
Views subscribe through the repository and re-render when their item
(or the whole list) changes. Delivery is synchronous on the caller's
thread: there is a single logical UI thread, so no locking.
"""

from __future__ import annotations

from collections.abc import Callable

from stockroom.domain.model.item import Item
from stockroom.logging import get_logger

ItemListener = Callable[[Item | None], None]
ListListener = Callable[[list[Item]], None]

_logger = get_logger(__name__)


class Subscription:
    """Handle returned by ``observe``; cancel it when the view goes away."""

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel = cancel
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._cancel()


class ItemStream:

    def __init__(self) -> None:
        self._item_listeners: dict[int, list[ItemListener]] = {}
        self._list_listeners: list[ListListener] = []

    def subscribe_item(
        self, item_id: int, listener: ItemListener, current: Item | None
    ) -> Subscription:
        """Register *listener* and hand it *current* straight away."""
        self._item_listeners.setdefault(item_id, []).append(listener)

        def _remove() -> None:
            listeners = self._item_listeners.get(item_id, [])
            if listener in listeners:
                listeners.remove(listener)
            if not listeners:
                self._item_listeners.pop(item_id, None)

        return self._start(Subscription(_remove), listener, current, item_id)

    def subscribe_list(self, listener: ListListener, current: list[Item]) -> Subscription:
        self._list_listeners.append(listener)

        def _remove() -> None:
            if listener in self._list_listeners:
                self._list_listeners.remove(listener)

        return self._start(Subscription(_remove), listener, current, None)

    def has_subscribers(self) -> bool:
        return bool(self._item_listeners or self._list_listeners)

    def publish(
        self,
        item_id: int,
        item: Item | None,
        all_items: Callable[[], list[Item]],
    ) -> None:
        """Notify listeners of a write to *item_id*.

        ``all_items`` is only called when somebody watches the full list.
        A listener that raises is logged and the error propagates to the
        writer.
        """
        for listener in list(self._item_listeners.get(item_id, [])):
            self._deliver(listener, item, item_id)

        if self._list_listeners:
            snapshot = all_items()
            for listener in list(self._list_listeners):
                self._deliver(listener, snapshot, item_id)

    def _start(
        self,
        subscription: Subscription,
        listener: Callable,
        current,
        item_id: int | None,
    ) -> Subscription:
        try:
            self._deliver(listener, current, item_id)
        except Exception:
            subscription.cancel()
            raise
        return subscription

    @staticmethod
    def _deliver(listener: Callable, value, item_id: int | None) -> None:
        try:
            listener(value)
        except Exception:
            if item_id is None:
                _logger.exception("Listener failed while handling the item list")
            else:
                _logger.exception("Listener failed while handling change to item %s", item_id)
            raise
