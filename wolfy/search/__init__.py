"""
WOLFY Search — Package init.

Re-exports the query, matcher and ranking entry points.
"""

from wolfy.search.fuzzy import FuzzyMatcher  # noqa: F401
from wolfy.search.models import (  # noqa: F401
    MatchResult, RankedItem, SearchableItem, item_id_for,
)
from wolfy.search.query import EMPTY_QUERY, Query, normalize  # noqa: F401
from wolfy.search.ranking import (  # noqa: F401
    HISTORY_WEIGHT, SECONDARY_FIELD_PENALTY, SearchService, rank,
)
