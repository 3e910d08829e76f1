"""
Unit tests for the Boyer-Moore-Horspool search module.

Tests cover:
- Basic and overlapping matches
- Length-1 patterns
- Short and empty sequences
- Equivalence with brute-force search
- Progress reporting
- HorspoolSearcher / MatchResult
"""

import pytest
import sys
import os

from hypothesis import given, strategies as st

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dna_matcher.horspool import (
    HorspoolSearcher,
    MatchResult,
    search,
    find_first,
    naive_search,
)
from dna_matcher.skip_table import SkipTable, build_skip_table
from dna_matcher.exceptions import InvalidAlphabetError, InvalidPatternError

dna = st.text(alphabet="ACGT")


def run(pattern, sequence):
    return search(pattern, sequence, build_skip_table(pattern))


class TestBasicSearch:
    """Test basic matching behaviour."""

    def test_overlapping_matches(self):
        assert run("AA", "AAAA") == (True, [0, 1, 2])

    def test_single_base_pattern(self):
        assert run("A", "ACAGTA") == (True, [0, 3, 5])

    def test_sequence_shorter_than_pattern(self):
        assert run("TTTT", "ACGT") == (False, [])

    def test_empty_sequence(self):
        assert run("ACG", "") == (False, [])

    def test_exact_full_length_match(self):
        assert run("GATTACA", "GATTACA") == (True, [0])

    def test_no_match(self):
        assert run("GGG", "ACACACATATAT") == (False, [])

    def test_match_at_end(self):
        assert run("TTG", "ACGTACGTTG") == (True, [7])

    def test_multiple_matches(self):
        #            0    5    10   15
        sequence = "GCAGAGAGTTGCAGAGAGCC"
        assert run("GCAGAGAG", sequence) == (True, [0, 10])

    def test_middle_mismatch(self):
        """Last base agrees, middle base does not."""
        assert run("ACGTA", "ACCTA") == (False, [])

    def test_first_base_mismatch(self):
        """Last and middle bases agree, the full scan rejects."""
        assert run("ACGTA", "CCGTA") == (False, [])

    def test_list_input(self):
        pattern = list("CG")
        sequence = list("ACGCGT")
        assert search(pattern, sequence, build_skip_table(pattern)) == (True, [1, 3])

    def test_idempotent(self):
        table = build_skip_table("ATA")
        sequence = "ATATATAGATA"
        first = search("ATA", sequence, table)
        second = search("ATA", sequence, table)
        assert first == second == (True, [0, 2, 4, 8])
        assert table.as_dict() == build_skip_table("ATA").as_dict()


class TestSearchErrors:
    """Test error handling in the search."""

    def test_empty_pattern(self):
        table = build_skip_table("A")
        with pytest.raises(InvalidPatternError):
            search("", "ACGT", table)

    def test_table_for_other_pattern(self):
        table = build_skip_table("ACG")
        with pytest.raises(InvalidPatternError):
            search("ACGT", "ACGTACGT", table)

    def test_zero_skip_rejected(self):
        """A hand-built table without progress is refused instead of looping."""
        table = SkipTable(distances=(0, 2, 2, 2), pattern_length=2)
        with pytest.raises(InvalidPatternError):
            search("CA", "CACACA", table)

    def test_invalid_base_under_window_end(self):
        with pytest.raises(InvalidAlphabetError):
            run("AC", "ANAC")


class TestEquivalence:
    """Horspool search must agree with brute force."""

    def test_naive_search(self):
        assert naive_search("AA", "AAAA") == [0, 1, 2]
        assert naive_search("ACGT", "ACG") == []

    def test_naive_search_empty_pattern(self):
        with pytest.raises(InvalidPatternError):
            naive_search("", "ACGT")

    @given(dna, st.text(alphabet="ACGT", min_size=1, max_size=8))
    def test_matches_brute_force(self, sequence, pattern):
        matched, positions = run(pattern, sequence)

        assert positions == naive_search(pattern, sequence)
        assert matched == bool(positions)

    @given(dna, st.text(alphabet="ACGT", min_size=1, max_size=8))
    def test_soundness(self, sequence, pattern):
        _, positions = run(pattern, sequence)

        for i in positions:
            assert i + len(pattern) <= len(sequence)
            assert sequence[i:i + len(pattern)] == pattern
        assert positions == sorted(set(positions))

    @given(dna, st.text(alphabet="ACGT", min_size=1, max_size=6))
    def test_find_first_matches_str_find(self, sequence, pattern):
        expected = sequence.find(pattern)
        assert find_first(pattern, sequence) == (expected if expected != -1 else None)


class TestProgress:
    """Test the progress callback."""

    def test_progress_reaches_total(self):
        calls = []
        search("A", "ACAGTA", build_skip_table("A"),
               progress=lambda done, total: calls.append((done, total)))

        assert calls[-1] == (6, 6)
        assert all(total == 6 for _, total in calls)
        assert [done for done, _ in calls] == sorted(done for done, _ in calls)

    def test_progress_bounded_rate(self):
        """At most one call per percent, plus the final one."""
        calls = []
        sequence = "A" * 10000
        search("A", sequence, build_skip_table("A"),
               progress=lambda done, total: calls.append(done))

        assert len(calls) <= 101
        assert calls[-1] == 10000

    def test_progress_does_not_change_result(self):
        table = build_skip_table("TA")
        sequence = "GTATATCGTA"
        assert search("TA", sequence, table, progress=lambda d, t: None) == \
            search("TA", sequence, table)

    def test_progress_empty_sequence(self):
        calls = []
        search("A", "", build_skip_table("A"),
               progress=lambda done, total: calls.append((done, total)))
        assert calls == [(0, 0)]


class TestHorspoolSearcher:
    """Test the searcher class and MatchResult."""

    def test_search_result(self):
        searcher = HorspoolSearcher("ACG")
        result = searcher.search("TACGACG", sequence_id="chr1")

        assert isinstance(result, MatchResult)
        assert result.positions == (1, 4)
        assert result.matched
        assert result.count == 2
        assert result.sequence_length == 7
        assert result.sequence_id == "chr1"
        assert result.pattern == "ACG"

    def test_no_match_result(self):
        result = HorspoolSearcher("TTTT").search("ACGT")
        assert not result.matched
        assert result.positions == ()

    def test_find_first(self):
        searcher = HorspoolSearcher("GA")
        assert searcher.find_first("CCGAGA") == 2
        assert searcher.find_first("CCCC") is None

    def test_search_many(self):
        searcher = HorspoolSearcher("AT")
        results = searcher.search_many({"s1": "ATAT", "s2": "GGGG"})

        assert [r.sequence_id for r in results] == ["s1", "s2"]
        assert results[0].positions == (0, 2)
        assert not results[1].matched

    def test_search_many_pairs(self):
        results = HorspoolSearcher("C").search_many([("x", "CAC")])
        assert results[0].positions == (0, 2)

    def test_to_dict(self):
        result = HorspoolSearcher("AA").search("AAA", sequence_id="s")
        assert result.to_dict() == {
            'sequence_id': 's',
            'pattern': 'AA',
            'sequence_length': 3,
            'matched': True,
            'positions': [0, 1],
        }

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            HorspoolSearcher("")
        with pytest.raises(InvalidAlphabetError):
            HorspoolSearcher("ACGU")

    def test_repr(self):
        assert repr(HorspoolSearcher("GAT")) == "HorspoolSearcher(pattern='GAT')"
