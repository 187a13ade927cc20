# This file is part of WOLFY.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Fuzzy subsequence matching with best-alignment scoring.

A query matches a candidate when every query character appears in the
candidate, in order, case-insensitively. Among all such placements the
matcher picks the one with the highest score:

    score = BASE_SCORE
          + CONSECUTIVE_BONUS  per consumed char directly after the previous one
          + FIRST_CHAR_BONUS   when a run starts at candidate position 0
          + WORD_START_BONUS   when a run starts after a separator or a
                               lower->upper case transition
          + CASE_MATCH_BONUS   per consumed char whose case equals the query's
          - GAP_PENALTY        per skipped candidate char between consumed chars
          - LENGTH_PENALTY     per candidate char beyond the query length

Equal scores resolve to the earliest-starting alignment.
"""

from __future__ import annotations

from typing import Optional

from wolfy.search.models import NO_MATCH, MatchResult

BASE_SCORE = 100
CONSECUTIVE_BONUS = 15
FIRST_CHAR_BONUS = 20
WORD_START_BONUS = 10
CASE_MATCH_BONUS = 1
GAP_PENALTY = 1
LENGTH_PENALTY = 1

SEPARATORS = frozenset(" -_/\\.")


class FuzzyMatcher:
    """Scores candidate strings against a query.

    Usage:
        matcher = FuzzyMatcher()
        result = matcher.match("vsc", "Visual Studio Code")
        result.matched_indices  # (0, 7, 14)
    """

    def __init__(
        self,
        consecutive_bonus: int = CONSECUTIVE_BONUS,
        first_char_bonus: int = FIRST_CHAR_BONUS,
        word_start_bonus: int = WORD_START_BONUS,
        case_match_bonus: int = CASE_MATCH_BONUS,
        gap_penalty: int = GAP_PENALTY,
        length_penalty: int = LENGTH_PENALTY,
    ):
        self.consecutive_bonus = consecutive_bonus
        self.first_char_bonus = first_char_bonus
        self.word_start_bonus = word_start_bonus
        self.case_match_bonus = case_match_bonus
        self.gap_penalty = gap_penalty
        self.length_penalty = length_penalty

    def match(self, query: str, candidate: str, original: Optional[str] = None) -> MatchResult:
        """Match a normalized query against ``candidate``.

        Args:
            query: Lower-cased query text.
            candidate: The string to search in, in its display casing.
            original: The query as typed, for the case-match bonus.
                Defaults to ``query``.
        """
        if not query:
            return MatchResult(matched=True, score=0)

        pattern = query.lower()
        if original is None:
            original = query
        if len(original) != len(pattern):
            # lower() changed the length; positions no longer line up
            original = None

        n = len(pattern)
        m = len(candidate)
        if n > m:
            return NO_MATCH

        lowered = [c.lower() for c in candidate]
        lo = self._leftmost(pattern, lowered)
        if lo is None:
            return NO_MATCH
        hi = self._rightmost(pattern, lowered)

        run_start = [self._run_start_bonus(candidate, j) for j in range(m)]

        # best[j]: best partial score with the current query char placed at j
        # start[j]: candidate position of the first consumed char on that path
        # backs[k][j]: where query char k-1 sits on the best path to (k, j)
        best: list[Optional[int]] = [None] * m
        start = [0] * m
        for j in range(lo[0], hi[0] + 1):
            if lowered[j] == pattern[0]:
                best[j] = run_start[j] + self._case_bonus(original, 0, candidate[j])
                start[j] = j
        backs: list[list[int]] = [[-1] * m]

        for k in range(1, n):
            cur: list[Optional[int]] = [None] * m
            cur_start = [0] * m
            back = [-1] * m
            # Running max over p <= j-2 of best[p] + gap_penalty * p;
            # subtracting gap_penalty * (j-1) later yields the gap cost.
            gap_val = 0
            gap_pos = -1
            for j in range(lo[k - 1] + 1, hi[k] + 1):
                p = j - 2
                if p >= 0 and best[p] is not None:
                    val = best[p] + self.gap_penalty * p
                    if gap_pos < 0 or (val, -start[p]) > (gap_val, -start[gap_pos]):
                        gap_val, gap_pos = val, p
                if lowered[j] != pattern[k]:
                    continue

                case = self._case_bonus(original, k, candidate[j])
                choice: Optional[tuple[int, int, int]] = None
                if j >= 1 and best[j - 1] is not None:
                    choice = (best[j - 1] + self.consecutive_bonus + case, start[j - 1], j - 1)
                if gap_pos >= 0:
                    score = gap_val - self.gap_penalty * (j - 1) + run_start[j] + case
                    if choice is None or (score, -start[gap_pos]) > (choice[0], -choice[1]):
                        choice = (score, start[gap_pos], gap_pos)
                if choice is not None:
                    cur[j], cur_start[j], back[j] = choice
            backs.append(back)
            best, start = cur, cur_start

        end = -1
        for j in range(m):
            if best[j] is None:
                continue
            if end < 0 or (best[j], -start[j]) > (best[end], -start[end]):
                end = j
        if end < 0:
            return NO_MATCH

        indices = [0] * n
        j = end
        for k in range(n - 1, -1, -1):
            indices[k] = j
            j = backs[k][j]

        score = BASE_SCORE + best[end] - (m - n) * self.length_penalty
        return MatchResult(matched=True, score=score, matched_indices=tuple(indices))

    def contains_match(self, pattern: str, target: str) -> bool:
        """Plain case-insensitive substring check."""
        if not pattern:
            return True
        return pattern.lower() in target.lower()

    def score_contains(self, pattern: str, target: str) -> int:
        """Score a contiguous substring match; 0 when absent."""
        if not pattern:
            return 0
        pos = self.find_contains(pattern, target)
        if pos < 0:
            return 0
        score = BASE_SCORE - pos * 2
        if pos == 0:
            score += self.first_char_bonus
        elif target[pos - 1] in SEPARATORS:
            score += self.word_start_bonus
        score -= max(len(target) - len(pattern), 0) * self.length_penalty
        return max(score, 1)

    def find_contains(self, pattern: str, target: str) -> int:
        """Index in ``target`` where ``pattern`` starts, or -1.

        Compares one character at a time so the index stays valid when
        lower-casing ``target`` would change its length.
        """
        needle = pattern.lower()
        if not needle or len(needle) > len(target):
            return -1
        lowered = [c.lower() for c in target]
        for start in range(len(target) - len(needle) + 1):
            if all(lowered[start + i] == ch for i, ch in enumerate(needle)):
                return start
        return -1

    # ─── Internal Helpers ─────────────────────────────────────────

    def _run_start_bonus(self, candidate: str, j: int) -> int:
        if j == 0:
            return self.first_char_bonus
        prev = candidate[j - 1]
        cur = candidate[j]
        if prev in SEPARATORS:
            return self.word_start_bonus
        if prev.islower() and cur.isupper():
            return self.word_start_bonus
        return 0

    def _case_bonus(self, original: Optional[str], k: int, char: str) -> int:
        if original is not None and original[k] == char:
            return self.case_match_bonus
        return 0

    @staticmethod
    def _leftmost(pattern: str, lowered: list[str]) -> Optional[list[int]]:
        """Earliest feasible position of each query char, or None."""
        positions = []
        k = 0
        for j, ch in enumerate(lowered):
            if ch == pattern[k]:
                positions.append(j)
                k += 1
                if k == len(pattern):
                    return positions
        return None

    @staticmethod
    def _rightmost(pattern: str, lowered: list[str]) -> list[int]:
        """Latest feasible position of each query char."""
        positions = [0] * len(pattern)
        k = len(pattern) - 1
        for j in range(len(lowered) - 1, -1, -1):
            if k < 0:
                break
            if lowered[j] == pattern[k]:
                positions[k] = j
                k -= 1
        return positions
