"""Durable byte stores behind the usage history."""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger("wolfy.history.backing")


class BackingStore(ABC):
    """Whole-blob read/write storage. The format belongs to the caller."""

    @abstractmethod
    def read_all(self) -> bytes:
        """Return the stored bytes; ``b""`` when nothing was stored yet."""

    @abstractmethod
    def write_all(self, data: bytes) -> bool:
        """Replace the stored bytes. Returns False on failure."""

    def describe(self) -> str:
        return type(self).__name__


def atomic_write(path: Path, data: bytes) -> None:
    """Atomic write: temp file in the same directory + os.replace().

    A crash mid-write leaves the previous file intact.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, str(path))
    except OSError:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


class FileBackingStore(BackingStore):
    """History file on local disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def read_all(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return b""

    def write_all(self, data: bytes) -> bool:
        try:
            atomic_write(self.path, data)
        except OSError as e:
            logger.warning("Failed to write history to %s: %s", self.path, e)
            return False
        return True

    def describe(self) -> str:
        return str(self.path)


class MemoryBackingStore(BackingStore):
    """In-memory store for tests; ``fail_writes`` simulates a broken disk."""

    def __init__(self, data: bytes = b"", fail_writes: bool = False):
        self.data = data
        self.fail_writes = fail_writes
        self.writes = 0

    def read_all(self) -> bytes:
        return self.data

    def write_all(self, data: bytes) -> bool:
        if self.fail_writes:
            return False
        self.data = data
        self.writes += 1
        return True

    def describe(self) -> str:
        return "<memory>"
