"""
WOLFY — Fuzzy Matcher Tests.

Expected scores follow from the default weights: base 100, consecutive 15,
first char 20, word start 10, case 1, gap 1 per char, length 1 per char.
"""

import pytest

from wolfy.search.fuzzy import FuzzyMatcher


@pytest.fixture
def matcher():
    return FuzzyMatcher()


class TestMembership:
    def test_exact_match(self, matcher):
        result = matcher.match("chrome", "Chrome")
        assert result.matched
        assert result.score == 200
        assert result.matched_indices == (0, 1, 2, 3, 4, 5)

    def test_subsequence_match(self, matcher):
        result = matcher.match("vsc", "Visual Studio Code")
        assert result.matched
        assert result.matched_indices == (0, 7, 14)
        assert result.score == 113

    def test_no_match(self, matcher):
        result = matcher.match("xyz", "Chrome")
        assert not result.matched
        assert result.matched_indices == ()

    def test_order_matters(self, matcher):
        assert not matcher.match("emorhc", "Chrome").matched

    def test_query_longer_than_candidate(self, matcher):
        assert not matcher.match("chromebook", "Chrome").matched

    def test_empty_query_is_neutral(self, matcher):
        result = matcher.match("", "anything")
        assert result.matched
        assert result.score == 0
        assert result.matched_indices == ()

    def test_case_insensitive_membership(self, matcher):
        lower = matcher.match("chrome", "chrome os")
        upper = matcher.match("chrome", "chrome os", original="CHROME")
        assert lower.matched and upper.matched
        assert lower.matched_indices == upper.matched_indices

    def test_uppercase_candidate(self, matcher):
        assert matcher.match("abc", "ABC").matched


class TestScoring:
    def test_consecutive_beats_scattered(self, matcher):
        consecutive = matcher.match("code", "code editor")
        scattered = matcher.match("code", "c_o_d_e")
        assert consecutive.score == 162
        assert scattered.score == 148
        assert consecutive.score > scattered.score

    def test_word_start_beats_mid_word(self, matcher):
        word_start = matcher.match("vs", "Visual Studio")
        mid_word = matcher.match("is", "Visual Studio")
        assert word_start.matched_indices == (0, 7)
        assert word_start.score > mid_word.score

    def test_prefers_word_start_alignment(self, matcher):
        result = matcher.match("vc", "Visual Code")
        assert result.matched_indices == (0, 7)

    def test_case_transition_is_a_word_start(self, matcher):
        camel = matcher.match("c", "GoogleChrome")
        flat = matcher.match("c", "Googlechrome")
        assert camel.score > flat.score
        assert matcher.match("gc", "GoogleChrome").matched_indices == (0, 6)

    def test_prefix_beats_inner_word(self, matcher):
        prefix = matcher.match("chrome", "Chrome Canary")
        inner = matcher.match("chrome", "Google Chrome")
        assert prefix.score == 193
        assert inner.score == 183

    def test_case_match_bonus(self, matcher):
        typed_upper = matcher.match("vc", "Visual Code", original="VC")
        typed_lower = matcher.match("vc", "Visual Code", original="vc")
        assert typed_upper.score > typed_lower.score

    def test_case_only_affects_score(self, matcher):
        lower = matcher.match("chrome", "chrome os")
        upper = matcher.match("chrome", "chrome os", original="CHROME")
        assert lower.score > upper.score

    def test_shorter_candidate_preferred(self, matcher):
        short = matcher.match("note", "Notes")
        long = matcher.match("note", "Notes and Reminders")
        assert short.score > long.score

    def test_tie_prefers_earliest_start(self, matcher):
        assert matcher.match("a", "banana").matched_indices == (1,)

    def test_custom_weights(self):
        flat = FuzzyMatcher(
            consecutive_bonus=0, first_char_bonus=0, word_start_bonus=0,
            case_match_bonus=0, gap_penalty=0, length_penalty=0,
        )
        assert flat.match("abc", "a-b-c").score == 100


class TestIndices:
    @pytest.mark.parametrize(
        "query,candidate",
        [
            ("vsc", "Visual Studio Code"),
            ("code", "c_o_d_e"),
            ("ffx", "Firefox Developer Edition"),
            ("np", "Notepad++"),
            ("aaa", "banana bandana"),
        ],
    )
    def test_strictly_increasing_and_valid(self, matcher, query, candidate):
        result = matcher.match(query, candidate)
        assert result.matched
        indices = result.matched_indices
        assert len(indices) == len(query)
        assert all(a < b for a, b in zip(indices, indices[1:]))
        assert all(0 <= i < len(candidate) for i in indices)
        assert "".join(candidate[i].lower() for i in indices) == query


class TestContains:
    def test_contains_match(self, matcher):
        assert matcher.contains_match("studio", "Visual Studio Code")
        assert not matcher.contains_match("xyz", "Visual Studio Code")
        assert matcher.contains_match("", "anything")

    def test_score_contains_prefix(self, matcher):
        assert matcher.score_contains("chrome", "Chrome") == 120

    def test_score_contains_word_start(self, matcher):
        assert matcher.score_contains("studio", "Visual Studio Code") == 84

    def test_score_contains_absent(self, matcher):
        assert matcher.score_contains("xyz", "Chrome") == 0
        assert matcher.score_contains("", "Chrome") == 0

    def test_score_contains_floor(self, matcher):
        assert matcher.score_contains("z", "a" * 300 + "z") == 1

    def test_find_contains(self, matcher):
        assert matcher.find_contains("code", "Visual Studio Code") == 14
        assert matcher.find_contains("xyz", "Visual Studio Code") == -1
        assert matcher.find_contains("", "Code") == -1

    def test_find_contains_with_length_changing_lowercase(self, matcher):
        name = "\u0130stanbul Maps"
        assert len(name.lower()) != len(name)
        assert matcher.find_contains("maps", name) == 9
        assert matcher.score_contains("maps", name) == 83
