"""
WOLFY History — Package init.

Re-exports the usage history store and its backing stores.
"""

from wolfy.history.backing import (  # noqa: F401
    BackingStore, FileBackingStore, MemoryBackingStore, atomic_write,
)
from wolfy.history.models import (  # noqa: F401
    HistoryEntry, LaunchRecord, check_item_id, parse_line,
)
from wolfy.history.store import (  # noqa: F401
    MAX_HISTORY_ENTRIES, HistoryStore, NullHistoryStore, UsageHistoryStore,
)
