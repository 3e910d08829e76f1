"""
Exceptions raised by the DNA matcher.

All errors derive from MatcherError, which is itself a ValueError so callers
that already guard against bad input with ``except ValueError`` keep working.
"""

from typing import Optional


class MatcherError(ValueError):
    """Base class for DNA matcher errors."""


class InvalidAlphabetError(MatcherError):
    """A symbol outside the A/C/G/T alphabet was found."""

    def __init__(self, symbol, position: Optional[int] = None, label: str = "sequence"):
        self.symbol = symbol
        self.position = position
        self.label = label
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Invalid {label} given: {symbol!r}{where}. "
            "Only 'A', 'C', 'G' and 'T' nucleobases are accepted."
        )


class InvalidPatternError(MatcherError):
    """The pattern cannot be searched for (e.g. it is empty)."""
