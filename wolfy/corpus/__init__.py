"""
WOLFY Corpus — Package init.

Item providers consumed by the search core.
"""

from wolfy.corpus.base import ItemProvider  # noqa: F401
from wolfy.corpus.manifest import ItemRecord, ManifestItemProvider  # noqa: F401
from wolfy.corpus.memory import MemoryItemProvider  # noqa: F401
