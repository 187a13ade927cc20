"""In-memory item provider."""

from __future__ import annotations

from typing import Iterable, Optional

from wolfy.corpus.base import ItemProvider
from wolfy.search.models import SearchableItem


class MemoryItemProvider(ItemProvider):
    """Holds items in a list; used by tests and embedding hosts."""

    def __init__(self, items: Optional[Iterable[SearchableItem]] = None):
        self._items: list[SearchableItem] = list(items or [])

    def discover_all(self) -> list[SearchableItem]:
        return list(self._items)

    def find_by_id(self, item_id: str) -> Optional[SearchableItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def count(self) -> int:
        return len(self._items)

    def add(self, item: SearchableItem) -> None:
        self._items.append(item)

    def remove(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]

    def clear(self) -> None:
        self._items.clear()
