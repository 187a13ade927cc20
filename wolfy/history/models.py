"""History data classes and record format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HEADER = "# wolfy history v1: id<TAB>count<TAB>last_launch"

# Everything str.splitlines() breaks on, plus the field separator.
_FORBIDDEN_ID_CHARS = frozenset("\t\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")


def check_item_id(item_id: str) -> str:
    """Return ``item_id`` if a history line can store it, else raise ValueError."""
    if not item_id or not item_id.strip():
        raise ValueError("item id must not be empty")
    if item_id.startswith("#"):
        raise ValueError(f"item id must not start with '#': {item_id!r}")
    if any(c in _FORBIDDEN_ID_CHARS for c in item_id):
        raise ValueError(f"item id must not contain tabs or line breaks: {item_id!r}")
    return item_id


@dataclass
class HistoryEntry:
    """Launch counter for one item id."""
    item_id: str
    count: int = 0
    last_launch: int = 0

    def to_line(self) -> str:
        return f"{self.item_id}\t{self.count}\t{self.last_launch}"


@dataclass(frozen=True)
class LaunchRecord:
    """A (item id, timestamp) pair from the recent-launch view."""
    item_id: str
    timestamp: int
    count: int


def parse_line(line: str) -> Optional[HistoryEntry]:
    """Parse one history line; None for blank, comment or malformed lines.

    Accepts ``id<TAB>count<TAB>last_launch`` and the older
    ``<count> <id>`` form, which carries no timestamp.
    """
    line = line.rstrip("\r\n")
    if not line.strip() or line.startswith("#"):
        return None

    if "\t" in line:
        parts = line.split("\t")
        if len(parts) < 3 or not parts[0]:
            return None
        try:
            count = int(parts[1])
            last_launch = int(parts[2])
        except ValueError:
            return None
        if count < 0 or last_launch < 0:
            return None
        return HistoryEntry(item_id=parts[0], count=count, last_launch=last_launch)

    count_str, sep, item_id = line.partition(" ")
    item_id = item_id.strip()
    if not sep or not item_id:
        return None
    try:
        count = int(count_str)
    except ValueError:
        return None
    if count < 0:
        return None
    return HistoryEntry(item_id=item_id, count=count, last_launch=0)
