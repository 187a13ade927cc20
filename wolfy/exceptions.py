"""
WOLFY — Custom Exceptions.

Typed error hierarchy separating corpus failures (fatal to a search)
from history failures (always degraded locally).
"""


class WolfyError(Exception):
    """Base exception for all WOLFY errors."""


class ConfigError(WolfyError):
    """Raised when settings are missing or out of range."""


class CorpusError(WolfyError):
    """Raised when the item corpus cannot be read.

    A search cannot proceed without a corpus, so this is the one error
    that propagates out of ``Launcher.search``.
    """


class ItemNotFound(CorpusError):
    """Raised when an item id is not known to the corpus provider."""


class HistoryError(WolfyError):
    """Base class for usage-history failures."""


class HistoryUnavailable(HistoryError):
    """Raised when the history lock cannot be acquired in time."""


class HistoryPersistError(HistoryError):
    """Raised when history could not be written to its backing store."""


class LaunchError(WolfyError):
    """Raised when the runtime fails to start an item."""
