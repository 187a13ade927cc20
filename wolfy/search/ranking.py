# This file is part of WOLFY.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Ranking: fuzzy text score plus usage-history boost."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Optional

from wolfy.search.fuzzy import FuzzyMatcher
from wolfy.search.models import RankedItem, SearchableItem
from wolfy.search.query import Query

logger = logging.getLogger("wolfy.search.ranking")

# A full-frequency item gains at most this much; enough to reorder
# near-ties, well under the gap between a word-start and a scattered match.
HISTORY_WEIGHT = 30.0

# Charged when only the description/keywords/category carry the match.
SECONDARY_FIELD_PENALTY = 50


def _sort_key(result: RankedItem) -> tuple:
    return (-result.score, result.item.name, result.item.id)


class SearchService:
    """Ranks a corpus snapshot against a query.

    Pure: never mutates the corpus, the query or the frequency map.
    """

    def __init__(
        self,
        matcher: Optional[FuzzyMatcher] = None,
        history_weight: float = HISTORY_WEIGHT,
        secondary_penalty: int = SECONDARY_FIELD_PENALTY,
    ):
        self.matcher = matcher or FuzzyMatcher()
        self.history_weight = history_weight
        self.secondary_penalty = secondary_penalty

    def rank(
        self,
        corpus: Sequence[SearchableItem],
        query: Query,
        frequencies: Optional[Mapping[str, float]] = None,
    ) -> list[RankedItem]:
        """Score and sort ``corpus`` for ``query``.

        Text queries are truncated to ``query.max_results``; an empty
        query returns the whole corpus ordered by usage.
        """
        frequencies = frequencies or {}
        if query.is_empty():
            results = [
                RankedItem(item=item, score=self._boost(item, frequencies))
                for item in corpus
            ]
        else:
            score_item = self._score_fuzzy if query.fuzzy else self._score_exact
            results = []
            for item in corpus:
                scored = score_item(item, query)
                if scored is None:
                    continue
                text_score, indices = scored
                results.append(
                    RankedItem(
                        item=item,
                        score=text_score + self._boost(item, frequencies),
                        matched_indices=indices,
                    )
                )

        results.sort(key=_sort_key)
        logger.debug(
            "Ranked %d/%d items for %r (fuzzy=%s)",
            len(results), len(corpus), query.text, query.fuzzy,
        )
        if query.is_empty():
            return results
        return results[: query.max_results]

    # ─── Internal Helpers ─────────────────────────────────────────

    def _boost(self, item: SearchableItem, frequencies: Mapping[str, float]) -> float:
        return frequencies.get(item.id, 0.0) * self.history_weight

    def _score_fuzzy(self, item: SearchableItem, query: Query) -> Optional[tuple[int, tuple[int, ...]]]:
        name_result = self.matcher.match(query.normalized, item.name, query.pattern)
        text = item.searchable_text()
        if text == item.name:
            if not name_result.matched:
                return None
            return name_result.score, name_result.matched_indices

        text_result = self.matcher.match(query.normalized, text, query.pattern)
        if not text_result.matched:
            return None
        secondary = text_result.score - self.secondary_penalty
        if name_result.matched:
            # Highlights always refer to the name.
            return max(name_result.score, secondary), name_result.matched_indices
        return secondary, ()

    def _score_exact(self, item: SearchableItem, query: Query) -> Optional[tuple[int, tuple[int, ...]]]:
        if not query.matches(item.searchable_text()):
            return None
        score = self.matcher.score_contains(query.normalized, item.name)
        if score == 0:
            return 1, ()
        start = self.matcher.find_contains(query.normalized, item.name)
        return score, tuple(range(start, start + len(query.normalized)))


def rank(
    corpus: Sequence[SearchableItem],
    query: Query,
    frequencies: Optional[Mapping[str, float]] = None,
) -> list[RankedItem]:
    """Rank with default weights."""
    return SearchService().rank(corpus, query, frequencies)
