# This file is part of WOLFY.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Query normalization."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_MAX_RESULTS = 50


@dataclass(frozen=True)
class Query:
    """A normalized, immutable search request.

    ``text`` keeps the caller's casing (used for case-match scoring);
    ``normalized`` is the lower-cased, trimmed form used for membership.
    """

    text: str
    fuzzy: bool = True
    max_results: int = DEFAULT_MAX_RESULTS
    normalized: str = field(init=False)

    def __post_init__(self) -> None:
        if self.max_results <= 0:
            raise ValueError(f"max_results must be > 0, got {self.max_results}")
        object.__setattr__(self, "normalized", self.text.strip().lower())

    @property
    def pattern(self) -> str:
        """Trimmed query text in its original casing."""
        return self.text.strip()

    def is_empty(self) -> bool:
        return not self.text.strip()

    def tokens(self) -> list[str]:
        return self.normalized.split()

    def matches(self, target: str) -> bool:
        """True iff every token occurs as a substring of ``target``."""
        if self.is_empty():
            return True
        target_lower = target.lower()
        return all(token in target_lower for token in self.tokens())


def normalize(
    raw_text: str,
    *,
    fuzzy: bool = True,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> Query:
    """Turn raw input text into a ``Query``. Never fails on the text."""
    return Query(text=raw_text or "", fuzzy=fuzzy, max_results=max_results)


EMPTY_QUERY = Query("")
