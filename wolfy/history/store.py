"""UsageHistoryStore — launch counters with durable, capped persistence."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from wolfy.exceptions import HistoryPersistError, HistoryUnavailable
from wolfy.history.backing import BackingStore, MemoryBackingStore
from wolfy.history.models import (
    HEADER, HistoryEntry, LaunchRecord, check_item_id, parse_line,
)

logger = logging.getLogger("wolfy.history.store")

MAX_HISTORY_ENTRIES = 100


class HistoryStore(ABC):
    """Usage history as seen by the search and launch paths."""

    @abstractmethod
    def record_launch(self, item_id: str) -> bool:
        """Count one launch. Returns False if it could not be persisted.

        Raises:
            ValueError: ``item_id`` cannot be stored in a history line.
        """

    @abstractmethod
    def launch_count(self, item_id: str) -> int:
        pass

    @abstractmethod
    def frequency_map(self, timeout: Optional[float] = None) -> dict[str, float]:
        """Map of item id -> count / max count, in [0, 1]."""

    @abstractmethod
    def recent_launches(self, limit: int) -> list[LaunchRecord]:
        pass

    @abstractmethod
    def clear(self) -> bool:
        pass

    @abstractmethod
    def load(self) -> int:
        pass

    @abstractmethod
    def save(self, strict: bool = False) -> bool:
        pass


class NullHistoryStore(HistoryStore):
    """Remembers nothing."""

    def record_launch(self, item_id: str) -> bool:
        return True

    def launch_count(self, item_id: str) -> int:
        return 0

    def frequency_map(self, timeout: Optional[float] = None) -> dict[str, float]:
        return {}

    def recent_launches(self, limit: int) -> list[LaunchRecord]:
        return []

    def clear(self) -> bool:
        return True

    def load(self) -> int:
        return 0

    def save(self, strict: bool = False) -> bool:
        return True


class UsageHistoryStore(HistoryStore):
    """Per-item launch counters behind a single lock.

    Every mutation is persisted while the lock is still held, so two
    launches can never interleave their writes. On save the entries are
    capped to the ``max_entries`` most launched ids; the id just launched
    is always kept.

    Usage:
        store = UsageHistoryStore(FileBackingStore("~/.wolfy/history.tsv"))
        store.load()
        store.record_launch("0f3a9c1e2b4d5a6f")
        store.frequency_map()  # {"0f3a9c1e2b4d5a6f": 1.0}
    """

    def __init__(
        self,
        backing: Optional[BackingStore] = None,
        max_entries: int = MAX_HISTORY_ENTRIES,
        clock: Callable[[], float] = time.time,
    ):
        if max_entries <= 0:
            raise ValueError(f"max_entries must be > 0, got {max_entries}")
        self._backing = backing if backing is not None else MemoryBackingStore()
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, HistoryEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def describe(self) -> str:
        return self._backing.describe()

    # ─── Mutations ────────────────────────────────────────────────

    def record_launch(self, item_id: str) -> bool:
        check_item_id(item_id)
        with self._lock:
            entry = self._entries.get(item_id)
            if entry is None:
                entry = HistoryEntry(item_id=item_id, count=0)
                self._entries[item_id] = entry
            entry.count += 1
            entry.last_launch = int(self._clock())
            logger.debug("Recorded launch for %s, count now %d", item_id, entry.count)
            ok = self._save_locked(keep=item_id)
        if not ok:
            logger.warning("Launch of %s counted in memory but not persisted", item_id)
        return ok

    def clear(self) -> bool:
        with self._lock:
            self._entries.clear()
            return self._save_locked()

    # ─── Reads ────────────────────────────────────────────────────

    def launch_count(self, item_id: str) -> int:
        with self._lock:
            entry = self._entries.get(item_id)
            return entry.count if entry else 0

    def frequency_map(self, timeout: Optional[float] = None) -> dict[str, float]:
        """Normalized launch frequencies, computed fresh on every call.

        Raises:
            HistoryUnavailable: the lock was not acquired within ``timeout``
                seconds (``None`` waits indefinitely).
        """
        acquired = self._lock.acquire(timeout=-1 if timeout is None else timeout)
        if not acquired:
            raise HistoryUnavailable(f"history lock not acquired within {timeout}s")
        try:
            counts = {item_id: e.count for item_id, e in self._entries.items()}
        finally:
            self._lock.release()
        if not counts:
            return {}
        max_count = max(max(counts.values()), 1)
        return {item_id: count / max_count for item_id, count in counts.items()}

    def recent_launches(self, limit: int) -> list[LaunchRecord]:
        """Most recent first; equal timestamps ordered by item id."""
        if limit <= 0:
            return []
        with self._lock:
            entries = sorted(
                self._entries.values(), key=lambda e: (-e.last_launch, e.item_id)
            )[:limit]
            return [
                LaunchRecord(item_id=e.item_id, timestamp=e.last_launch, count=e.count)
                for e in entries
            ]

    def entries(self) -> list[HistoryEntry]:
        """Copy of all entries in retention order."""
        with self._lock:
            return [
                HistoryEntry(e.item_id, e.count, e.last_launch)
                for e in self._retention_order()
            ]

    # ─── Persistence ──────────────────────────────────────────────

    def load(self) -> int:
        """Replace in-memory entries with the persisted ones.

        A missing or unreadable file yields an empty history; malformed
        lines are skipped. Returns the number of entries loaded.
        """
        try:
            raw = self._backing.read_all()
        except OSError as e:
            logger.warning("Could not read history from %s: %s", self.describe(), e)
            raw = b""

        entries: dict[str, HistoryEntry] = {}
        skipped = 0
        for line in raw.decode("utf-8", errors="replace").splitlines():
            entry = parse_line(line)
            if entry is None:
                if line.strip() and not line.startswith("#"):
                    skipped += 1
                continue
            existing = entries.get(entry.item_id)
            if existing is None:
                entries[entry.item_id] = entry
            else:
                existing.count = max(existing.count, entry.count)
                existing.last_launch = max(existing.last_launch, entry.last_launch)

        if skipped:
            logger.debug("Skipped %d malformed history lines in %s", skipped, self.describe())

        with self._lock:
            self._entries = entries
            self._prune_locked()
            loaded = len(self._entries)
        logger.debug("Loaded %d history entries from %s", loaded, self.describe())
        return loaded

    def save(self, strict: bool = False) -> bool:
        """Persist the capped entry set.

        Raises:
            HistoryPersistError: the write failed and ``strict`` is set.
        """
        with self._lock:
            ok = self._save_locked()
        if not ok and strict:
            raise HistoryPersistError(f"could not write history to {self.describe()}")
        return ok

    # ─── Internal Helpers ─────────────────────────────────────────

    def _retention_order(self) -> list[HistoryEntry]:
        return sorted(
            self._entries.values(),
            key=lambda e: (-e.count, -e.last_launch, e.item_id),
        )

    def _prune_locked(self, keep: Optional[str] = None) -> None:
        """Cap entries to ``max_entries``; ``keep`` is never dropped."""
        if len(self._entries) <= self._max_entries:
            return
        order = self._retention_order()
        if keep in self._entries:
            others = [e for e in order if e.item_id != keep]
            kept = others[: self._max_entries - 1] + [self._entries[keep]]
        else:
            kept = order[: self._max_entries]
        dropped = len(self._entries) - len(kept)
        self._entries = {e.item_id: e for e in kept}
        logger.debug("Dropped %d low-count history entries", dropped)

    def _save_locked(self, keep: Optional[str] = None) -> bool:
        self._prune_locked(keep)
        lines = [HEADER]
        lines.extend(e.to_line() for e in self._retention_order())
        data = ("\n".join(lines) + "\n").encode("utf-8")
        ok = self._backing.write_all(data)
        if ok:
            logger.debug("Saved %d history entries to %s", len(self._entries), self.describe())
        return ok
