"""
Skip Table Module

Bad-character preprocessing for the Boyer-Moore-Horspool search.

For every nucleobase the table stores how far the search window may move when
that base is read at the window's last position. Bases absent from the
pattern (ignoring its last position) skip the whole pattern length; the others
skip to align their rightmost occurrence with the window's end.

Example:
    >>> table = build_skip_table("GCAGAGAG")
    >>> table.as_dict()
    {'A': 1, 'C': 6, 'G': 2, 'T': 8}
"""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from .alphabet import ALPHABET_SIZE, NUCLEOBASES, Symbol, symbol_index
from .exceptions import InvalidPatternError


@dataclass(frozen=True)
class SkipTable:
    """
    Immutable bad-character skip table for one pattern.

    Attributes:
        distances: Skip distance per nucleobase slot (A, C, G, T order)
        pattern_length: Length of the pattern the table was built from
    """
    distances: Tuple[int, int, int, int]
    pattern_length: int

    def __post_init__(self):
        object.__setattr__(self, 'distances', tuple(self.distances))
        if len(self.distances) != ALPHABET_SIZE:
            raise ValueError(
                f"Skip table needs {ALPHABET_SIZE} entries, got {len(self.distances)}"
            )
        for distance in self.distances:
            if not 0 <= distance <= self.pattern_length:
                raise ValueError(
                    f"Skip distance {distance} outside [0, {self.pattern_length}]"
                )

    def __getitem__(self, symbol: Symbol) -> int:
        return self.distances[symbol_index(symbol)]

    def __len__(self) -> int:
        return len(self.distances)

    def as_dict(self) -> Dict[str, int]:
        """Return the table as {symbol: distance}."""
        return dict(zip(NUCLEOBASES, self.distances))


def build_skip_table(pattern: Sequence[Symbol]) -> SkipTable:
    """
    Build the bad-character skip table of a pattern.

    Positions 0..P-2 are scanned left to right, so each base ends up with the
    distance of its rightmost occurrence before the last position. A pattern
    of length 1 gives a table of all ones.

    Args:
        pattern: Non-empty pattern of nucleobases

    Returns:
        SkipTable for the pattern

    Raises:
        InvalidPatternError: If the pattern is empty
        InvalidAlphabetError: If the pattern holds a non-nucleobase symbol
    """
    pattern_length = len(pattern)
    if pattern_length == 0:
        raise InvalidPatternError("Pattern must contain at least one nucleobase")

    distances = [pattern_length] * ALPHABET_SIZE
    for i in range(pattern_length - 1):
        distances[symbol_index(pattern[i])] = pattern_length - i - 1

    # The last position never sets a distance but must still be a nucleobase
    symbol_index(pattern[-1])

    return SkipTable(distances=tuple(distances), pattern_length=pattern_length)
