"""Item corpus provider - base class."""

from abc import ABC, abstractmethod
from typing import Optional

from wolfy.search.models import SearchableItem


class ItemProvider(ABC):
    """Source of the launchable items the search core ranks.

    Implementations raise ``CorpusError`` when the corpus cannot be read.
    """

    @abstractmethod
    def discover_all(self) -> list[SearchableItem]:
        pass

    @abstractmethod
    def find_by_id(self, item_id: str) -> Optional[SearchableItem]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    def refresh(self) -> None:
        """Drop any cached snapshot so the next read sees fresh data."""
