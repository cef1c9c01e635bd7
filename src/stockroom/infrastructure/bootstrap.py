"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockroom.infrastructure.config import Settings
from stockroom.infrastructure.persistence.json_item_repository import (
    JsonItemRepository,
)


def item_repository(settings: Settings | None = None) -> JsonItemRepository:
    settings = settings or Settings()
    return JsonItemRepository(settings.items_file)
