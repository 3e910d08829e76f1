"""
Boyer-Moore-Horspool Search Module

Exact search of a nucleobase pattern inside a DNA sequence. The search window
slides left to right; after each alignment it jumps ahead by the skip-table
distance of the sequence base under the window's last position, so most
sequence positions are never compared.

Every occurrence is reported, overlapping ones included.

Usage:
    from dna_matcher.horspool import HorspoolSearcher, search
    from dna_matcher.skip_table import build_skip_table

    table = build_skip_table("AA")
    matched, positions = search("AA", "AAAA", table)   # True, [0, 1, 2]

    searcher = HorspoolSearcher("ACG")
    result = searcher.search("TACGACG")
    result.positions                                   # (1, 4)
"""

from dataclasses import dataclass, field
from typing import (Callable, Dict, Iterable, List, Mapping, Optional,
                    Sequence, Tuple, Union)

from .alphabet import Symbol
from .exceptions import InvalidPatternError
from .skip_table import SkipTable, build_skip_table

# progress(done, total): done is the window offset reached, total the sequence length
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class MatchResult:
    """
    All occurrences of a pattern in one sequence.

    Attributes:
        pattern: Pattern that was searched for
        positions: 0-based start indices, in increasing order
        sequence_length: Length of the searched sequence
        sequence_id: Identifier of the sequence (FASTA record id), if any
    """
    pattern: str
    positions: Tuple[int, ...] = field(default_factory=tuple)
    sequence_length: int = 0
    sequence_id: Optional[str] = None

    @property
    def matched(self) -> bool:
        return len(self.positions) > 0

    @property
    def count(self) -> int:
        return len(self.positions)

    def to_dict(self) -> Dict:
        return {
            'sequence_id': self.sequence_id,
            'pattern': self.pattern,
            'sequence_length': self.sequence_length,
            'matched': self.matched,
            'positions': list(self.positions),
        }


class _ProgressReporter:
    """Forward scan progress to a callback, at most once per percent."""

    def __init__(self, callback: ProgressCallback, total: int):
        self.callback = callback
        self.total = total
        self.last_percent = -1

    def update(self, done: int) -> None:
        if self.total == 0:
            return
        done = min(done, self.total)
        percent = done * 100 // self.total
        if percent > self.last_percent:
            self.last_percent = percent
            self.callback(done, self.total)

    def finish(self) -> None:
        if self.last_percent < 100:
            self.last_percent = 100
            self.callback(self.total, self.total)


def _window_matches(pattern: Sequence[Symbol],
                    sequence: Sequence[Symbol],
                    start: int,
                    last: int,
                    middle: int) -> bool:
    """
    Compare the window starting at ``start`` with the pattern.

    Checks the last base, then the middle base, and only then scans the
    remaining positions left to right.
    """
    if sequence[start + last] != pattern[last]:
        return False
    if sequence[start + middle] != pattern[middle]:
        return False
    for i in range(last):
        if i == middle:
            continue
        if sequence[start + i] != pattern[i]:
            return False
    return True


def _check_table(pattern: Sequence[Symbol], table: SkipTable) -> int:
    pattern_length = len(pattern)
    if pattern_length == 0:
        raise InvalidPatternError("Pattern must contain at least one nucleobase")
    if table.pattern_length != pattern_length:
        raise InvalidPatternError(
            f"Skip table was built for a pattern of length {table.pattern_length}, "
            f"got a pattern of length {pattern_length}"
        )
    return pattern_length


def _advance(table: SkipTable, base: Symbol) -> int:
    distance = table[base]
    if distance == 0:
        raise InvalidPatternError(
            f"Skip table gives no progress for {base!r}; it does not belong to this pattern"
        )
    return distance


def search(pattern: Sequence[Symbol],
           sequence: Sequence[Symbol],
           table: SkipTable,
           progress: Optional[ProgressCallback] = None) -> Tuple[bool, List[int]]:
    """
    Find every occurrence of a pattern in a sequence.

    Args:
        pattern: Non-empty pattern of nucleobases
        sequence: Sequence to search (may be empty)
        table: Skip table built from ``pattern``
        progress: Optional callback receiving (offset reached, sequence length).
            Called when the completed percentage grows and once at the end.

    Returns:
        Tuple of (matched, positions), where positions lists the 0-based
        start indices in increasing order and matched is True iff it is
        non-empty.

    Raises:
        InvalidPatternError: If the pattern is empty or does not fit the table
        InvalidAlphabetError: If a base read under the window's last position
            is not a nucleobase
    """
    pattern_length = _check_table(pattern, table)
    sequence_length = len(sequence)
    last = pattern_length - 1
    middle = pattern_length // 2

    reporter = _ProgressReporter(progress, sequence_length) if progress else None
    positions: List[int] = []

    skip = 0
    while pattern_length <= sequence_length - skip:
        if _window_matches(pattern, sequence, skip, last, middle):
            positions.append(skip)
        skip += _advance(table, sequence[skip + last])
        if reporter:
            reporter.update(skip)

    if reporter:
        reporter.finish()

    return bool(positions), positions


def find_first(pattern: Sequence[Symbol],
               sequence: Sequence[Symbol],
               table: Optional[SkipTable] = None) -> Optional[int]:
    """
    Return the index of the first occurrence of a pattern, or None.

    Args:
        pattern: Non-empty pattern of nucleobases
        sequence: Sequence to search
        table: Skip table for ``pattern``; built on the fly if omitted
    """
    if table is None:
        table = build_skip_table(pattern)
    pattern_length = _check_table(pattern, table)
    last = pattern_length - 1
    middle = pattern_length // 2

    skip = 0
    while pattern_length <= len(sequence) - skip:
        if _window_matches(pattern, sequence, skip, last, middle):
            return skip
        skip += _advance(table, sequence[skip + last])
    return None


def naive_search(pattern: Sequence[Symbol], sequence: Sequence[Symbol]) -> List[int]:
    """
    Brute-force search: compare the pattern at every offset.

    Slow reference implementation used to cross-check the Horspool search.
    """
    n = len(sequence)
    m = len(pattern)
    if m == 0:
        raise InvalidPatternError("Pattern must contain at least one nucleobase")

    matches = []
    for i in range(n - m + 1):
        ok = True
        for j in range(m):
            if sequence[i + j] != pattern[j]:
                ok = False
                break
        if ok:
            matches.append(i)
    return matches


class HorspoolSearcher:
    """
    Search one pattern in any number of sequences.

    The skip table is built once in the constructor and reused, read-only,
    by every search.

    Attributes:
        pattern (Sequence): Pattern being searched for
        table (SkipTable): Its bad-character skip table
    """

    def __init__(self, pattern: Sequence[Symbol]):
        """
        Parameters:
            pattern: Non-empty pattern of nucleobases

        Raises:
            InvalidPatternError: If the pattern is empty
            InvalidAlphabetError: If the pattern holds a non-nucleobase symbol
        """
        self.pattern = pattern
        self.table = build_skip_table(pattern)

    @property
    def pattern_text(self) -> str:
        if isinstance(self.pattern, str):
            return self.pattern
        return ''.join(str(getattr(base, 'symbol', base)) for base in self.pattern)

    def search(self,
               sequence: Sequence[Symbol],
               sequence_id: Optional[str] = None,
               progress: Optional[ProgressCallback] = None) -> MatchResult:
        """Search one sequence and wrap the positions in a MatchResult."""
        _, positions = search(self.pattern, sequence, self.table, progress=progress)
        return MatchResult(
            pattern=self.pattern_text,
            positions=tuple(positions),
            sequence_length=len(sequence),
            sequence_id=sequence_id,
        )

    def find_first(self, sequence: Sequence[Symbol]) -> Optional[int]:
        return find_first(self.pattern, sequence, self.table)

    def search_many(
        self,
        records: Union[Mapping[str, Sequence[Symbol]], Iterable[Tuple[str, Sequence[Symbol]]]],
        progress: Optional[ProgressCallback] = None
    ) -> List[MatchResult]:
        """
        Search several sequences.

        Args:
            records: {sequence_id: sequence} or an iterable of (id, sequence)
            progress: Optional per-sequence progress callback

        Returns:
            One MatchResult per record, in input order
        """
        items = records.items() if isinstance(records, Mapping) else records
        return [
            self.search(sequence, sequence_id=sequence_id, progress=progress)
            for sequence_id, sequence in items
        ]

    def __repr__(self) -> str:
        return f"HorspoolSearcher(pattern={self.pattern_text!r})"
