"""
WOLFY — Search orchestration.

Binds the item corpus, the usage history and the ranking service into
the two operations a host UI needs: ``search`` on every keystroke and
``record_launch`` when the user picks an item.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from wolfy.config import SearchSettings
from wolfy.corpus.base import ItemProvider
from wolfy.corpus.manifest import ManifestItemProvider
from wolfy.exceptions import HistoryError, ItemNotFound
from wolfy.history.backing import FileBackingStore
from wolfy.history.models import LaunchRecord
from wolfy.history.store import HistoryStore, UsageHistoryStore
from wolfy.search.models import RankedItem, SearchableItem
from wolfy.search.query import Query, normalize
from wolfy.search.ranking import SearchService

logger = logging.getLogger("wolfy.launcher")


class Runtime(ABC):
    """Starts an item. Raises ``LaunchError`` on failure."""

    @abstractmethod
    def execute(self, item: SearchableItem) -> None:
        pass


class NullRuntime(Runtime):
    """Starts nothing; remembers what it was asked to start."""

    def __init__(self):
        self.executed: list[SearchableItem] = []

    def execute(self, item: SearchableItem) -> None:
        self.executed.append(item)


class Launcher:
    """Search and launch use cases over shared, injected collaborators.

    Usage:
        launcher = Launcher(MemoryItemProvider(items), UsageHistoryStore())
        results = launcher.search("chr")
        launcher.record_launch(results[0].item.id)
    """

    def __init__(
        self,
        provider: ItemProvider,
        history: Optional[HistoryStore] = None,
        settings: Optional[SearchSettings] = None,
        service: Optional[SearchService] = None,
        runtime: Optional[Runtime] = None,
    ):
        self.provider = provider
        self.history = history
        self.settings = settings or SearchSettings()
        self.service = service or SearchService(history_weight=self.settings.history_weight)
        self.runtime = runtime or NullRuntime()

    @classmethod
    def from_paths(
        cls,
        manifest: str | Path,
        history: str | Path,
        settings: Optional[SearchSettings] = None,
        runtime: Optional[Runtime] = None,
    ) -> Launcher:
        """Compose a launcher over a manifest file and a history file."""
        settings = settings or SearchSettings.from_env()
        store = UsageHistoryStore(
            FileBackingStore(history), max_entries=settings.history_max_entries
        )
        store.load()
        return cls(
            ManifestItemProvider(manifest), store, settings=settings, runtime=runtime
        )

    # ─── Search Path ──────────────────────────────────────────────

    def search(self, raw_text: str) -> list[RankedItem]:
        """Rank the current corpus for ``raw_text``.

        Raises:
            CorpusError: the corpus could not be read.
        """
        query = normalize(
            raw_text, fuzzy=self.settings.fuzzy, max_results=self.settings.max_results
        )
        return self.search_query(query)

    def search_query(self, query: Query) -> list[RankedItem]:
        corpus = self.provider.discover_all()
        return self.service.rank(corpus, query, self.frequency_map())

    def top_results(self, raw_text: str, limit: int) -> list[RankedItem]:
        return self.search(raw_text)[: max(limit, 0)]

    def all_items(self) -> list[SearchableItem]:
        return self.provider.discover_all()

    def frequency_map(self) -> dict[str, float]:
        """Current frequencies, or ``{}`` when history is unavailable."""
        if self.history is None:
            return {}
        try:
            return self.history.frequency_map(timeout=self.settings.history_lock_timeout)
        except HistoryError as e:
            logger.warning("Searching without history: %s", e)
            return {}

    # ─── Launch Path ──────────────────────────────────────────────

    def record_launch(self, item_id: str) -> bool:
        """Count a launch. False means it was counted but not persisted."""
        if self.history is None:
            return False
        return self.history.record_launch(item_id)

    def launch(self, item_id: str) -> bool:
        """Start an item through the runtime, then record the launch.

        Raises:
            ItemNotFound: no item with ``item_id``.
            LaunchError: the runtime failed; nothing is recorded.
        """
        item = self.provider.find_by_id(item_id)
        if item is None:
            raise ItemNotFound(f"Item not found: {item_id}")
        self.runtime.execute(item)
        logger.info("Launched %s (%s)", item.name, item.id)
        return self.record_launch(item.id)

    def recent(self, limit: int = 10) -> list[LaunchRecord]:
        if self.history is None:
            return []
        return self.history.recent_launches(limit)

    def clear_history(self) -> bool:
        if self.history is None:
            return True
        return self.history.clear()
