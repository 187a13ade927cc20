"""
WOLFY — Launcher search core.

Fuzzy ranking of launchable items with usage-frequency boosting and a
durable, capped launch history.
"""

__version__ = "0.3.0"

from wolfy.launcher import Launcher  # noqa: E402
from wolfy.search import Query, RankedItem, SearchableItem, normalize  # noqa: E402

__all__ = ["Launcher", "Query", "RankedItem", "SearchableItem", "normalize", "__version__"]
